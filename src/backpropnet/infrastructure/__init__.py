"""
Infrastructure layer: concrete activations, losses, initializers, network
stages, model services and the demo runner.
"""

from ._activations import ReLU, Sigmoid, available_activations, get_activation
from ._losses import HalfSquaredError
from .utils.initializer import ParameterInitializer, resolve_initializer
from .mlp import DenseLayer, FeedForwardNetwork, Unit
from .cnn import CnnPipeline, Convolution2D, FullyConnectedHead, MaxPool2D
from .services import MlpService, RnnServiceStub, TransformerServiceStub
from .factory import NeuralNetFactory
from .datasets import CnnDemoDataProvider, MlpDemoDataProvider, resolve_demo_data
from .runner import DemoConfig, History, run_demo

__all__ = [
    "ReLU",
    "Sigmoid",
    "available_activations",
    "get_activation",
    "HalfSquaredError",
    "ParameterInitializer",
    "resolve_initializer",
    "Unit",
    "DenseLayer",
    "FeedForwardNetwork",
    "Convolution2D",
    "MaxPool2D",
    "FullyConnectedHead",
    "CnnPipeline",
    "MlpService",
    "RnnServiceStub",
    "TransformerServiceStub",
    "NeuralNetFactory",
    "MlpDemoDataProvider",
    "CnnDemoDataProvider",
    "resolve_demo_data",
    "DemoConfig",
    "History",
    "run_demo",
]
