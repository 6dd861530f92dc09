"""
Command-line entry point for the training demos.

Examples
--------
    python -m backpropnet                    # MLP then CNN, 20 epochs each
    python -m backpropnet --model cnn --lr 0.05 --epochs 50
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence

from .domain._errors import TopologyNotImplementedError
from .domain._service import ModelKind
from .infrastructure.runner._runner import DemoConfig, run_demo

ALL = "all"
DEFAULT_SEQUENCE = (ModelKind.MLP, ModelKind.CNN)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="backpropnet",
        description="Train a small MLP or CNN on a fixed demo sample.",
    )
    ap.add_argument(
        "--model",
        choices=[k.value for k in ModelKind] + [ALL],
        default=ALL,
        help="Topology to run; 'all' runs mlp then cnn.",
    )
    ap.add_argument("--epochs", type=int, default=20)
    ap.add_argument(
        "--lr",
        type=float,
        default=None,
        help="Learning rate (default: 0.5 for mlp, 0.1 for cnn).",
    )
    ap.add_argument(
        "--seed", type=int, default=0, help="Seed of the parameter initializer."
    )
    ap.add_argument("--quiet", action="store_true", help="Suppress per-epoch output.")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    kinds: List[ModelKind] = (
        list(DEFAULT_SEQUENCE) if args.model == ALL else [ModelKind(args.model)]
    )
    config = DemoConfig(
        epochs=args.epochs, learning_rate=args.lr, seed=args.seed, verbose=not args.quiet
    )

    try:
        for kind in kinds:
            history = run_demo(kind, config)
            if args.quiet:
                last = history.last()
                print(
                    f"{kind.value}: output {last['output']:.4f} - "
                    f"target {last['target']} - loss {last['loss']:.4f}"
                )
    except (ValueError, TopologyNotImplementedError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0
