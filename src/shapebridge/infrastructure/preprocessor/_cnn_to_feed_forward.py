"""
CNN (2D) -> feed-forward input preprocessor.

`CnnToFeedForwardPreProcessor` is the 2D counterpart of
`Cnn3DToFeedForwardPreProcessor`: it flattens NCHW activations
[N, C, H, W] into [N, C*H*W] and reshapes epsilons back.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Dict, Optional, Tuple

from ...domain._errors import InvalidInputTypeError, InvalidShapeError
from ...domain._input_type import InputType, InputTypeKind
from ...domain._mask_state import MaskState
from ...domain._tensor import ITensor
from ...domain.model._shape_config_mixin import ShapeConfigMixin
from ._reshape_function import ensure_c_order, flatten_to_2d, unflatten_from_2d
from ._serialization_core import register_preprocessor


@register_preprocessor()
@dataclass(frozen=True)
class CnnToFeedForwardPreProcessor(ShapeConfigMixin):
    """
    Preprocessor from 4D NCHW activations to 2D dense activations.

    Parameters
    ----------
    input_height, input_width : int
        Spatial extents of the CNN activations.
    num_channels : int, optional
        Number of channels. Defaults to 1.
    """

    input_height: int
    input_width: int
    num_channels: int = 1

    _CONFIG_KEYS: ClassVar[Dict[str, str]] = {
        "input_height": "inputHeight",
        "input_width": "inputWidth",
        "num_channels": "numChannels",
    }
    _DIMENSION_FIELDS: ClassVar[Tuple[str, ...]] = (
        "input_height",
        "input_width",
        "num_channels",
    )

    def __post_init__(self) -> None:
        self._validate_dimensions()

    @property
    def flattened_size(self) -> int:
        return self.input_height * self.input_width * self.num_channels

    def _activation_shape(self) -> Tuple[int, int, int]:
        return (self.num_channels, self.input_height, self.input_width)

    def pre_process(self, x: ITensor, minibatch_size: int) -> ITensor:
        """
        Flatten (N, C, H, W) activations into (N, C*H*W).

        Rank-2 inputs are passed through unchanged.

        Raises
        ------
        InvalidShapeError
            If `x` is not rank 4 with the configured (C, H, W).
        """
        if x.rank == 2:
            return x

        expected = self._activation_shape()
        if x.rank != 4 or tuple(x.shape[1:]) != expected:
            dims = ", ".join(str(d) for d in expected)
            raise InvalidShapeError(
                f"[minibatch, {dims}] (NCHW)", x.shape, op="pre_process"
            )

        return flatten_to_2d(x)

    def backprop(self, epsilons: ITensor, minibatch_size: int) -> ITensor:
        """
        Reshape (N, C*H*W) epsilons into (N, C, H, W).

        Rank-4 epsilons are passed through (after C-order normalization).
        """
        epsilons = ensure_c_order(epsilons)

        if epsilons.rank == 4:
            return epsilons

        if epsilons.rank != 2 or epsilons.size(1) != self.flattened_size:
            raise InvalidShapeError(
                f"[minibatch, {self.flattened_size}]", epsilons.shape, op="backprop"
            )

        return unflatten_from_2d(epsilons, self._activation_shape())

    def get_output_type(self, input_type: Optional[InputType]) -> InputType:
        """
        Infer the feed-forward input type produced from a CNN input type.

        Both CNN and CNN_FLAT input types are accepted.

        Raises
        ------
        InvalidInputTypeError
            If `input_type` is None or of any other kind.
        """
        if input_type is None or input_type.kind not in (
            InputTypeKind.CNN,
            InputTypeKind.CNN_FLAT,
        ):
            raise InvalidInputTypeError("CNN or CNN_FLAT", input_type)

        return InputType.feed_forward(input_type.arr_element_count())

    def feed_forward_mask_array(
        self,
        mask: Optional[ITensor],
        current_mask_state: Optional[MaskState],
        minibatch_size: int,
    ) -> Tuple[Optional[ITensor], Optional[MaskState]]:
        """
        Propagate the mask array.

        Per-example masks (rank <= 2) are passed through. Rank-4 masks of
        shape (N, C, 1, 1) are reshaped to (N, C).

        Raises
        ------
        InvalidShapeError
            If a rank-4 mask has spatial extents other than 1x1, or the mask
            has any other rank.
        """
        if mask is None or mask.rank <= 2:
            return mask, current_mask_state

        if mask.rank != 4 or mask.size(2) != 1 or mask.size(3) != 1:
            raise InvalidShapeError(
                "[minibatch, 1], [minibatch, C] or [minibatch, C, 1, 1]",
                mask.shape,
                op="feed_forward_mask_array",
            )

        shape = mask.shape
        return (
            mask.reshape((shape[0], math.prod(shape[1:])), order=mask.ordering()),
            current_mask_state,
        )
