"""
Feed-forward -> CNN3D input preprocessor.

The opposite case of `Cnn3DToFeedForwardPreProcessor`: lets a dense layer
(or flat input data) feed a 3D convolutional layer.

- forward: reshapes 2D activations [N, D*H*W*C] into 5D activations
  [N, C, D, H, W] (NCDHW) or [N, D, H, W, C] (NDHWC);
- backward: flattens 5D epsilons back into [N, D*H*W*C].
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ...domain._errors import InvalidInputTypeError, InvalidShapeError
from ...domain._input_type import Convolution3DFormat, InputType, InputTypeKind
from ...domain._mask_state import MaskState
from ...domain._tensor import ITensor
from ._cnn3d_config import Cnn3DShapeConfig
from ._reshape_function import ensure_c_order, flatten_to_2d, unflatten_from_2d
from ._serialization_core import register_preprocessor


@register_preprocessor()
@dataclass(frozen=True)
class FeedForwardToCnn3DPreProcessor(Cnn3DShapeConfig):
    """
    Preprocessor from 2D dense activations to 5D convolutional activations.

    Parameters
    ----------
    input_depth, input_height, input_width : int
        Spatial extents of the produced CNN3D activations.
    num_channels : int, optional
        Number of channels. Defaults to 1.
    is_ncdhw : bool, optional
        Layout of the produced activations. Defaults to True (NCDHW).
    """

    def pre_process(self, x: ITensor, minibatch_size: int) -> ITensor:
        """
        Reshape (N, D*H*W*C) activations into 5D activations.

        Rank-5 inputs are passed through unchanged.

        Raises
        ------
        InvalidShapeError
            If `x` is not rank 2 or its column count does not match.
        """
        if x.rank == 5:
            return x

        if x.rank != 2 or x.size(1) != self.flattened_size:
            raise InvalidShapeError(
                f"[minibatch, {self.flattened_size}]", x.shape, op="pre_process"
            )

        return unflatten_from_2d(x, self._activation_shape())

    def backprop(self, epsilons: ITensor, minibatch_size: int) -> ITensor:
        """
        Flatten 5D epsilons back into (N, D*H*W*C).

        Rank-2 epsilons are passed through (after C-order normalization).

        Raises
        ------
        InvalidShapeError
            If `epsilons` is not rank 5 with the configured per-example shape.
        """
        epsilons = ensure_c_order(epsilons)

        if epsilons.rank == 2:
            return epsilons

        expected = self._activation_shape()
        if epsilons.rank != 5 or tuple(epsilons.shape[1:]) != expected:
            dims = ", ".join(str(d) for d in expected)
            raise InvalidShapeError(
                f"[minibatch, {dims}]", epsilons.shape, op="backprop"
            )

        return flatten_to_2d(epsilons)

    def get_output_type(self, input_type: Optional[InputType]) -> InputType:
        """
        Infer the CNN3D input type produced from a feed-forward input type.

        CNN3D input types are returned unchanged.

        Raises
        ------
        InvalidInputTypeError
            If `input_type` is None, of another kind, or a feed-forward type
            whose size does not equal `depth * height * width * channels`.
        """
        if input_type is None:
            raise InvalidInputTypeError("FF or CNN3D", input_type)

        if input_type.kind is InputTypeKind.CNN3D:
            return input_type

        if input_type.kind is not InputTypeKind.FF:
            raise InvalidInputTypeError("FF or CNN3D", input_type)

        size = input_type.arr_element_count()
        if size != self.flattened_size:
            raise InvalidInputTypeError(
                "FF",
                input_type,
                reason=(
                    f"size {size} does not match depth {self.input_depth} x "
                    f"height {self.input_height} x width {self.input_width} x "
                    f"channels {self.num_channels} = {self.flattened_size}"
                ),
            )

        fmt = Convolution3DFormat.NCDHW if self.is_ncdhw else Convolution3DFormat.NDHWC
        return InputType.convolutional_3d(
            self.input_depth,
            self.input_height,
            self.input_width,
            self.num_channels,
            data_format=fmt,
        )

    def feed_forward_mask_array(
        self,
        mask: Optional[ITensor],
        current_mask_state: Optional[MaskState],
        minibatch_size: int,
    ) -> Tuple[Optional[ITensor], Optional[MaskState]]:
        return mask, current_mask_state
