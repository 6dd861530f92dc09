#!/usr/bin/env python3
"""
Run the MLP and/or CNN training demos from a source checkout.

Accepts the same arguments as `python -m backpropnet`.
"""

import os
import sys

# Ensure repo_root/src is importable when running this file directly:
# repo_root/
#   src/backpropnet/...
#   scripts/run_demo.py
THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT_DIR = os.path.abspath(os.path.join(THIS_DIR, ".."))
SRC_DIR = os.path.join(ROOT_DIR, "src")

if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from backpropnet.cli import main


if __name__ == "__main__":
    sys.exit(main())
