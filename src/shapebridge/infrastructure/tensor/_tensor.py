"""
Concrete Tensor implementation (NumPy backend).

This module provides `Tensor`, a thin NumPy-backed implementation of the
domain-level `ITensor` protocol. It exposes exactly what input preprocessors
need: rank and axis queries, memory-layout queries, a layout-normalizing
copy (`dup`) and an order-aware `reshape`.

Design notes
------------
- A `Tensor` wraps an `np.ndarray` without copying it (`from_numpy`). Views
  produced by `reshape` share storage with their source when NumPy can
  express the new shape as a view.
- `ordering()` reports ``"f"`` only for arrays that are Fortran-contiguous and
  not C-contiguous; every other array reports ``"c"``. Use
  `is_c_contiguous()` to check whether the strides are actually row-major.
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np

from ...domain._tensor import ITensor

_ORDERS = ("c", "f")


def _normalize_order(order: str) -> str:
    o = str(order).lower()
    if o not in _ORDERS:
        raise ValueError(f"order must be one of {_ORDERS}, got {order!r}")
    return o


def _normalize_shape(shape_like: Any) -> tuple[int, ...]:
    if isinstance(shape_like, (int, np.integer)):
        return (int(shape_like),)
    return tuple(int(d) for d in shape_like)


class Tensor(ITensor):
    """
    NumPy-backed tensor.

    Parameters
    ----------
    shape : Sequence[int]
        Shape of the tensor. Storage is zero-initialized.
    dtype : np.dtype, optional
        Element dtype. Defaults to np.float32.
    order : str, optional
        Memory layout of the allocated storage, ``"c"`` or ``"f"``.
    """

    def __init__(
        self,
        shape: Sequence[int],
        *,
        dtype: Any = np.float32,
        order: str = "c",
    ) -> None:
        order = _normalize_order(order)
        self._data: np.ndarray = np.zeros(
            _normalize_shape(shape), dtype=np.dtype(dtype), order=order.upper()
        )

    @classmethod
    def from_numpy(cls, arr: Any) -> "Tensor":
        """
        Wrap an array-like object as a Tensor.

        Parameters
        ----------
        arr : Any
            Array-like input. `np.ndarray` inputs are wrapped without copying,
            so their memory layout is preserved.

        Returns
        -------
        Tensor
            Tensor sharing storage with `arr` when `arr` is an ndarray.
        """
        out = cls.__new__(cls)
        out._data = arr if isinstance(arr, np.ndarray) else np.asarray(arr)
        return out

    @classmethod
    def zeros(cls, shape: Sequence[int], *, dtype: Any = np.float32) -> "Tensor":
        return cls(shape, dtype=dtype)

    @classmethod
    def arange(
        cls, shape: Sequence[int], *, dtype: Any = np.float32, order: str = "c"
    ) -> "Tensor":
        """
        Build a tensor holding 0, 1, 2, ... laid out in row-major element order
        and stored with the requested memory `order`.
        """
        shape = _normalize_shape(shape)
        n = int(np.prod(shape, dtype=np.int64))
        arr = np.arange(n, dtype=np.dtype(dtype)).reshape(shape)
        if _normalize_order(order) == "f":
            arr = np.asfortranarray(arr)
        return cls.from_numpy(arr)

    def __repr__(self) -> str:
        return (
            f"Tensor(shape={self.shape}, dtype={self._data.dtype}, "
            f"ordering='{self.ordering()}')"
        )

    @property
    def shape(self) -> tuple[int, ...]:
        return tuple(int(d) for d in self._data.shape)

    @property
    def rank(self) -> int:
        return int(self._data.ndim)

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def size(self, axis: int) -> int:
        """
        Return the extent of `axis`.

        Raises
        ------
        IndexError
            If `axis` is out of range for this tensor's rank.
        """
        return int(self._data.shape[axis])

    def numel(self) -> int:
        return int(self._data.size)

    def ordering(self) -> str:
        flags = self._data.flags
        if flags.f_contiguous and not flags.c_contiguous:
            return "f"
        return "c"

    def is_c_contiguous(self) -> bool:
        return bool(self._data.flags.c_contiguous)

    def dup(self, order: str = "c") -> "Tensor":
        """
        Return a copy of this tensor that owns its storage.

        Parameters
        ----------
        order : str, optional
            Memory layout of the copy, ``"c"`` or ``"f"``.
        """
        order = _normalize_order(order)
        return self.__class__.from_numpy(
            np.array(self._data, order=order.upper(), copy=True)
        )

    def reshape(self, new_shape: Sequence[int], order: str = "c") -> "Tensor":
        """
        Return a tensor with the same elements and a new shape.

        Notes
        -----
        - Elements are read and written in `order` (row-major for ``"c"``).
        - Returns a view when NumPy can express the result without copying.
        - Supports a single ``-1`` entry, inferred from the element count.

        Raises
        ------
        ValueError
            If the element count of `new_shape` does not match this tensor.
        """
        order = _normalize_order(order)
        new_shape = _normalize_shape(new_shape)
        try:
            reshaped = self._data.reshape(new_shape, order=order.upper())
        except ValueError as e:
            raise ValueError(
                f"Invalid reshape from {self.shape} to {new_shape}"
            ) from e
        return self.__class__.from_numpy(reshaped)

    def to_numpy(self) -> np.ndarray:
        return self._data
