from ._history import History
from ._runner import DEFAULT_LEARNING_RATES, DemoConfig, run_demo

__all__ = [
    History.__name__,
    DemoConfig.__name__,
    run_demo.__name__,
    "DEFAULT_LEARNING_RATES",
]
