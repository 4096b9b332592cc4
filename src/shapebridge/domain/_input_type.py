"""
Input type (shape descriptor) definitions.

An input type describes the per-example shape of the activations flowing
into a layer, without carrying any data. Preprocessors use input types to
infer the shape they produce (`get_output_type`) so that a layer graph can be
configured before any tensor exists.

Kinds
-----
- FF        : feed-forward, a single flat dimension `size`
- RNN       : recurrent, `size` features over `time_series_length` steps
- CNN       : 2D convolutional, (channels, height, width)
- CNN_FLAT  : 2D convolutional data stored flattened, (height, width, depth)
- CNN3D     : 3D convolutional, (channels, depth, height, width)

All descriptors are frozen dataclasses, so they compare by value and can be
shared freely.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class InputTypeKind(Enum):
    """
    Enumeration of input-type kinds.
    """

    FF = "FF"
    RNN = "RNN"
    CNN = "CNN"
    CNN_FLAT = "CNN_FLAT"
    CNN3D = "CNN3D"


class Convolution3DFormat(Enum):
    """
    Axis ordering of 3D convolutional activations.

    Attributes
    ----------
    NCDHW : Convolution3DFormat
        Channels first: [minibatch, channels, depth, height, width].
    NDHWC : Convolution3DFormat
        Channels last: [minibatch, depth, height, width, channels].
    """

    NCDHW = "NCDHW"
    NDHWC = "NDHWC"


class InputType(ABC):
    """
    Abstract base for all input-type descriptors.

    Concrete descriptors are constructed through the static factories on this
    class, e.g. ``InputType.feed_forward(72)``.
    """

    @property
    @abstractmethod
    def kind(self) -> InputTypeKind:
        """Return the kind of this descriptor."""

    @abstractmethod
    def arr_element_count(self) -> int:
        """Return the number of elements per example."""

    @abstractmethod
    def shape(self, include_batch_dim: bool = False) -> tuple[int, ...]:
        """
        Return the activation shape described by this input type.

        Parameters
        ----------
        include_batch_dim : bool, optional
            If True, a leading ``-1`` is prepended for the minibatch axis.
        """

    @staticmethod
    def feed_forward(size: int) -> "InputTypeFeedForward":
        return InputTypeFeedForward(size=int(size))

    @staticmethod
    def recurrent(size: int, time_series_length: int = -1) -> "InputTypeRecurrent":
        return InputTypeRecurrent(
            size=int(size), time_series_length=int(time_series_length)
        )

    @staticmethod
    def convolutional(
        height: int, width: int, channels: int
    ) -> "InputTypeConvolutional":
        return InputTypeConvolutional(
            height=int(height), width=int(width), channels=int(channels)
        )

    @staticmethod
    def convolutional_flat(
        height: int, width: int, depth: int
    ) -> "InputTypeConvolutionalFlat":
        return InputTypeConvolutionalFlat(
            height=int(height), width=int(width), depth=int(depth)
        )

    @staticmethod
    def convolutional_3d(
        depth: int,
        height: int,
        width: int,
        channels: int,
        data_format: Convolution3DFormat = Convolution3DFormat.NCDHW,
    ) -> "InputTypeConvolutional3D":
        """
        Build a 3D convolutional descriptor.

        Parameters
        ----------
        depth, height, width : int
            Spatial extents.
        channels : int
            Number of channels (feature maps).
        data_format : Convolution3DFormat, optional
            Axis ordering of the described activations. Defaults to NCDHW.
        """
        return InputTypeConvolutional3D(
            depth=int(depth),
            height=int(height),
            width=int(width),
            channels=int(channels),
            data_format=data_format,
        )


def _with_batch(shape: tuple[int, ...], include_batch_dim: bool) -> tuple[int, ...]:
    return (-1,) + shape if include_batch_dim else shape


@dataclass(frozen=True)
class InputTypeFeedForward(InputType):
    """Flat feed-forward activations of `size` features."""

    size: int

    @property
    def kind(self) -> InputTypeKind:
        return InputTypeKind.FF

    def arr_element_count(self) -> int:
        return self.size

    def shape(self, include_batch_dim: bool = False) -> tuple[int, ...]:
        return _with_batch((self.size,), include_batch_dim)


@dataclass(frozen=True)
class InputTypeRecurrent(InputType):
    """
    Recurrent activations of `size` features per time step.

    A `time_series_length` of -1 means the length is unknown or variable.
    """

    size: int
    time_series_length: int = -1

    @property
    def kind(self) -> InputTypeKind:
        return InputTypeKind.RNN

    def arr_element_count(self) -> int:
        """
        Return `size * time_series_length`.

        When the length is unknown (-1) this is the per-time-step count,
        `size`, since the full-sequence count is undefined.
        """
        return self.size * max(self.time_series_length, 1)

    def shape(self, include_batch_dim: bool = False) -> tuple[int, ...]:
        return _with_batch((self.size, self.time_series_length), include_batch_dim)


@dataclass(frozen=True)
class InputTypeConvolutional(InputType):
    """2D convolutional activations, NCHW."""

    height: int
    width: int
    channels: int

    @property
    def kind(self) -> InputTypeKind:
        return InputTypeKind.CNN

    def arr_element_count(self) -> int:
        return self.channels * self.height * self.width

    def shape(self, include_batch_dim: bool = False) -> tuple[int, ...]:
        return _with_batch((self.channels, self.height, self.width), include_batch_dim)


@dataclass(frozen=True)
class InputTypeConvolutionalFlat(InputType):
    """
    2D convolutional data that is stored flattened as [N, height*width*depth],
    e.g. raw image pixels fed straight into a network.
    """

    height: int
    width: int
    depth: int

    @property
    def kind(self) -> InputTypeKind:
        return InputTypeKind.CNN_FLAT

    def arr_element_count(self) -> int:
        return self.height * self.width * self.depth

    def flattened_size(self) -> int:
        return self.arr_element_count()

    def unflattened_type(self) -> InputTypeConvolutional:
        """Return the equivalent CNN descriptor (depth becomes channels)."""
        return InputTypeConvolutional(
            height=self.height, width=self.width, channels=self.depth
        )

    def shape(self, include_batch_dim: bool = False) -> tuple[int, ...]:
        return _with_batch((self.arr_element_count(),), include_batch_dim)


@dataclass(frozen=True)
class InputTypeConvolutional3D(InputType):
    """3D convolutional activations in NCDHW or NDHWC layout."""

    depth: int
    height: int
    width: int
    channels: int
    data_format: Convolution3DFormat = Convolution3DFormat.NCDHW

    @property
    def kind(self) -> InputTypeKind:
        return InputTypeKind.CNN3D

    def arr_element_count(self) -> int:
        return self.channels * self.depth * self.height * self.width

    def shape(self, include_batch_dim: bool = False) -> tuple[int, ...]:
        if self.data_format is Convolution3DFormat.NCDHW:
            s = (self.channels, self.depth, self.height, self.width)
        else:
            s = (self.depth, self.height, self.width, self.channels)
        return _with_batch(s, include_batch_dim)
