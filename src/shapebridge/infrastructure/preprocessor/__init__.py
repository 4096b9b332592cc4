from ._cnn3d_to_feed_forward import Cnn3DToFeedForwardPreProcessor
from ._cnn_to_feed_forward import CnnToFeedForwardPreProcessor
from ._feed_forward_to_cnn3d import FeedForwardToCnn3DPreProcessor
from ._reshape_function import ensure_c_order, flatten_to_2d, unflatten_from_2d
from ._serialization_core import (
    preprocessor_from_config,
    preprocessor_from_json,
    preprocessor_to_config,
    preprocessor_to_json,
    register_preprocessor,
    registered_preprocessors,
)

__all__ = [
    "Cnn3DToFeedForwardPreProcessor",
    "CnnToFeedForwardPreProcessor",
    "FeedForwardToCnn3DPreProcessor",
    "ensure_c_order",
    "flatten_to_2d",
    "preprocessor_from_config",
    "preprocessor_from_json",
    "preprocessor_to_config",
    "preprocessor_to_json",
    "register_preprocessor",
    "registered_preprocessors",
    "unflatten_from_2d",
]
