"""
Tensor interface definitions.

This module defines the domain-level interface for tensor-like objects
consumed by input preprocessors. Preprocessors only ever inspect and reshape
tensors, so the protocol is limited to rank/shape queries, memory-layout
queries and the two layout-preserving operations they rely on.

Notes
-----
- `ordering()` and `is_c_contiguous()` are deliberately separate: an array
  may *declare* C ordering while its strides are not row-major (e.g. a
  transposed or sliced view). Callers that need a true row-major buffer
  should check `is_c_contiguous()`.
- `reshape(..., order="c")` must preserve row-major element order.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable


@runtime_checkable
class ITensor(Protocol):
    """
    Tensor interface.

    An `ITensor` represents a multi-dimensional array that flows between
    layers of a network. Structural typing is used so that any backend that
    provides the methods below can be passed through a preprocessor.
    """

    @property
    def shape(self) -> tuple[int, ...]:
        """
        Return the shape of the tensor.

        Returns
        -------
        tuple[int, ...]
            The tensor's shape.
        """
        ...

    @property
    def rank(self) -> int:
        """
        Return the number of dimensions of the tensor.

        Returns
        -------
        int
            Length of `shape`.
        """
        ...

    def size(self, axis: int) -> int:
        """
        Return the extent of one axis.

        Parameters
        ----------
        axis : int
            Axis index. Negative indices count from the end.

        Returns
        -------
        int
            Number of elements along `axis`.
        """
        ...

    def ordering(self) -> str:
        """
        Return the declared memory ordering, either ``"c"`` or ``"f"``.
        """
        ...

    def is_c_contiguous(self) -> bool:
        """
        Return True if the underlying buffer is laid out in row-major order
        with descending strides.
        """
        ...

    def dup(self, order: str = "c") -> "ITensor":
        """
        Return a copy of the tensor laid out in the requested order.

        Parameters
        ----------
        order : str, optional
            ``"c"`` (row-major) or ``"f"`` (column-major).

        Returns
        -------
        ITensor
            A new tensor that owns its storage.
        """
        ...

    def reshape(self, new_shape: Sequence[int], order: str = "c") -> "ITensor":
        """
        Return a tensor with the same elements and a new shape.

        Parameters
        ----------
        new_shape : Sequence[int]
            Requested output shape.
        order : str, optional
            Element order used to read and write elements. Defaults to ``"c"``.

        Returns
        -------
        ITensor
            Reshaped tensor. Implementations return a view when possible.
        """
        ...

    def to_numpy(self) -> Any:
        """
        Return the backend-native array object backing this tensor.
        """
        ...
