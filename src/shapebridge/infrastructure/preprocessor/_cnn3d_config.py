"""
Shared configuration for CNN3D preprocessors.

`Cnn3DToFeedForwardPreProcessor` and `FeedForwardToCnn3DPreProcessor` carry
the same five fields and serialize them under the same record keys. This
module holds that record once; the two preprocessors only add the direction
specific reshape logic on top.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict, Tuple

from ...domain.model._shape_config_mixin import ShapeConfigMixin


@dataclass(frozen=True)
class Cnn3DShapeConfig(ShapeConfigMixin):
    """
    Immutable CNN3D geometry shared by the CNN3D preprocessors.

    Attributes
    ----------
    input_depth, input_height, input_width : int
        Spatial extents of the CNN3D activations.
    num_channels : int
        Number of channels (feature maps). Defaults to 1.
    is_ncdhw : bool
        True for channels-first (NCDHW), False for channels-last (NDHWC).
        Defaults to True.
    """

    input_depth: int
    input_height: int
    input_width: int
    num_channels: int = 1
    is_ncdhw: bool = True

    _CONFIG_KEYS: ClassVar[Dict[str, str]] = {
        "input_depth": "inputDepth",
        "input_height": "inputHeight",
        "input_width": "inputWidth",
        "num_channels": "numChannels",
        "is_ncdhw": "isNCDHW",
    }
    _DIMENSION_FIELDS: ClassVar[Tuple[str, ...]] = (
        "input_depth",
        "input_height",
        "input_width",
        "num_channels",
    )

    def __post_init__(self) -> None:
        self._validate_dimensions()
        if not isinstance(self.is_ncdhw, bool):
            raise ValueError(f"is_ncdhw must be a bool, got {self.is_ncdhw!r}")

    @property
    def flattened_size(self) -> int:
        return (
            self.input_depth * self.input_height * self.input_width * self.num_channels
        )

    def _activation_shape(self) -> Tuple[int, int, int, int]:
        if self.is_ncdhw:
            return (
                self.num_channels,
                self.input_depth,
                self.input_height,
                self.input_width,
            )
        return (self.input_depth, self.input_height, self.input_width, self.num_channels)
