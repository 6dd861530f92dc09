from ._demo_data import CnnDemoDataProvider, MlpDemoDataProvider, resolve_demo_data

__all__ = [
    MlpDemoDataProvider.__name__,
    CnnDemoDataProvider.__name__,
    resolve_demo_data.__name__,
]
