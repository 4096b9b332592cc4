"""
CNN3D -> feed-forward input preprocessor.

`Cnn3DToFeedForwardPreProcessor` lets 3D convolutional layers and dense
(feed-forward) layers be used together, e.g. Conv3D -> Dense. It does two
things:

- forward: reshapes 5D activations out of the CNN3D layer, with shape
  [N, C, D, H, W] (NCDHW) or [N, D, H, W, C] (NDHWC), into 2D activations
  [N, D*H*W*C] for the feed-forward layer;
- backward: reshapes 2D epsilons out of the feed-forward layer back into
  5D epsilons suitable for the CNN3D layer.

Notes
-----
The forward pass collapses axes 1..4 in their stored order regardless of
`is_ncdhw`, while the backward pass builds the 5D shape from the configured
layout. For NDHWC inputs both directions agree; they are not permuted into a
common channel order.

See `FeedForwardToCnn3DPreProcessor` for the opposite case.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from ...domain._errors import InvalidInputTypeError, InvalidShapeError
from ...domain._input_type import InputType, InputTypeConvolutional3D, InputTypeKind
from ...domain._mask_state import MaskState
from ...domain._tensor import ITensor
from ._cnn3d_config import Cnn3DShapeConfig
from ._reshape_function import ensure_c_order, flatten_to_2d
from ._serialization_core import register_preprocessor


@register_preprocessor()
@dataclass(frozen=True)
class Cnn3DToFeedForwardPreProcessor(Cnn3DShapeConfig):
    """
    Preprocessor from 5D convolutional activations to 2D dense activations.

    Parameters
    ----------
    input_depth : int
        Depth of the CNN3D activations.
    input_height : int
        Height of the CNN3D activations.
    input_width : int
        Width of the CNN3D activations.
    num_channels : int, optional
        Number of channels (feature maps). Defaults to 1.
    is_ncdhw : bool, optional
        True for channels-first (NCDHW), False for channels-last (NDHWC).
        Defaults to True.

    Shape semantics
    ---------------
    pre_process:
        (N, C, D, H, W) or (N, D, H, W, C)  ->  (N, D*H*W*C)

    backprop:
        (N, D*H*W*C)  ->  (N, C, D, H, W) or (N, D, H, W, C)
    """

    def _describe_5d(self) -> str:
        dims = ", ".join(str(d) for d in self._activation_shape())
        layout = "NCDHW" if self.is_ncdhw else "NDHWC"
        return f"[minibatch, {dims}] ({layout})"

    def pre_process(self, x: ITensor, minibatch_size: int) -> ITensor:
        """
        Flatten CNN3D activations into feed-forward activations.

        Parameters
        ----------
        x : ITensor
            Rank-5 activations, or rank-2 activations which are passed through.
        minibatch_size : int
            Minibatch size hint (unused; the batch size is read from `x`).

        Returns
        -------
        ITensor
            `x` itself if it is rank 2, else a (N, D*H*W*C) tensor.

        Raises
        ------
        InvalidShapeError
            If `x` is not rank 5 or its channel axis does not equal
            `num_channels`.
        """
        if x.rank == 2:
            return x

        channel_axis = 1 if self.is_ncdhw else 4
        if x.rank != 5 or x.size(channel_axis) != self.num_channels:
            raise InvalidShapeError(self._describe_5d(), x.shape, op="pre_process")

        return flatten_to_2d(x)

    def backprop(self, epsilons: ITensor, minibatch_size: int) -> ITensor:
        """
        Reshape 2D epsilons back into the CNN3D activation layout.

        Parameters
        ----------
        epsilons : ITensor
            Rank-2 epsilons of shape (N, D*H*W*C), or rank-5 epsilons which
            are passed through.
        minibatch_size : int
            Minibatch size hint (unused).

        Returns
        -------
        ITensor
            Epsilons of shape (N, C, D, H, W) if `is_ncdhw`, else
            (N, D, H, W, C).

        Raises
        ------
        InvalidShapeError
            If `epsilons` is not rank 2 or its column count does not equal
            `depth * height * width * channels`.
        """
        epsilons = ensure_c_order(epsilons)

        if epsilons.rank == 5:
            return epsilons

        if epsilons.rank != 2 or epsilons.size(1) != self.flattened_size:
            raise InvalidShapeError(
                f"[minibatch, {self.flattened_size}] "
                f"(depth {self.input_depth} x height {self.input_height} x "
                f"width {self.input_width} x channels {self.num_channels})",
                epsilons.shape,
                op="backprop",
            )

        return epsilons.reshape(
            (epsilons.size(0),) + self._activation_shape(), order="c"
        )

    def get_output_type(self, input_type: Optional[InputType]) -> InputType:
        """
        Infer the feed-forward input type produced from a CNN3D input type.

        Raises
        ------
        InvalidInputTypeError
            If `input_type` is None or not of kind CNN3D.
        """
        if input_type is None or input_type.kind is not InputTypeKind.CNN3D:
            raise InvalidInputTypeError(InputTypeKind.CNN3D.value, input_type)

        c: InputTypeConvolutional3D = input_type  # type: ignore[assignment]
        out_size = math.prod((c.channels, c.depth, c.height, c.width))
        return InputType.feed_forward(out_size)

    def feed_forward_mask_array(
        self,
        mask: Optional[ITensor],
        current_mask_state: Optional[MaskState],
        minibatch_size: int,
    ) -> Tuple[Optional[ITensor], Optional[MaskState]]:
        # Per-example masks (one value per example) are unaffected by the
        # spatial flatten, so both are passed through unmodified.
        return mask, current_mask_state
