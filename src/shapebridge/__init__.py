"""
shapebridge: input preprocessors that reshape activations and epsilons
between convolutional, recurrent and feed-forward layer families.
"""

from .domain import (
    Convolution3DFormat,
    IInputPreProcessor,
    InputType,
    InputTypeKind,
    InvalidInputTypeError,
    InvalidShapeError,
    MaskState,
)
from .infrastructure import (
    Cnn3DToFeedForwardPreProcessor,
    CnnToFeedForwardPreProcessor,
    FeedForwardToCnn3DPreProcessor,
    Tensor,
)
from .infrastructure.preprocessor import (
    preprocessor_from_config,
    preprocessor_from_json,
    preprocessor_to_config,
    preprocessor_to_json,
)

__version__ = "0.1.0"

__all__ = [
    "Cnn3DToFeedForwardPreProcessor",
    "CnnToFeedForwardPreProcessor",
    "Convolution3DFormat",
    "FeedForwardToCnn3DPreProcessor",
    "IInputPreProcessor",
    "InputType",
    "InputTypeKind",
    "InvalidInputTypeError",
    "InvalidShapeError",
    "MaskState",
    "Tensor",
    "preprocessor_from_config",
    "preprocessor_from_json",
    "preprocessor_to_config",
    "preprocessor_to_json",
]
