from ._mlp_service import MlpService
from ._stubs import RnnServiceStub, TransformerServiceStub

__all__ = [
    MlpService.__name__,
    RnnServiceStub.__name__,
    TransformerServiceStub.__name__,
]
