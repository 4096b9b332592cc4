from ._errors import InvalidInputTypeError, InvalidShapeError
from ._input_type import (
    Convolution3DFormat,
    InputType,
    InputTypeConvolutional,
    InputTypeConvolutional3D,
    InputTypeConvolutionalFlat,
    InputTypeFeedForward,
    InputTypeKind,
    InputTypeRecurrent,
)
from ._mask_state import MaskState
from ._preprocessor import IInputPreProcessor
from ._tensor import ITensor

__all__ = [
    "Convolution3DFormat",
    "IInputPreProcessor",
    "ITensor",
    "InputType",
    "InputTypeConvolutional",
    "InputTypeConvolutional3D",
    "InputTypeConvolutionalFlat",
    "InputTypeFeedForward",
    "InputTypeKind",
    "InputTypeRecurrent",
    "InvalidInputTypeError",
    "InvalidShapeError",
    "MaskState",
]
