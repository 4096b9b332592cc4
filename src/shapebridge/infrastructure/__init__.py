from .preprocessor import (
    Cnn3DToFeedForwardPreProcessor,
    CnnToFeedForwardPreProcessor,
    FeedForwardToCnn3DPreProcessor,
)
from .tensor import Tensor

__all__ = [
    "Cnn3DToFeedForwardPreProcessor",
    "CnnToFeedForwardPreProcessor",
    "FeedForwardToCnn3DPreProcessor",
    "Tensor",
]
