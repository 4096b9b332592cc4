"""
Shape- and type-related exceptions for shapebridge.

This module defines the errors raised by input preprocessors when the
tensors or shape descriptors they receive do not match their configuration.
Both are usage errors: they are raised immediately with a message that
includes the expected and the actual value, and are never retried.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence


class InvalidShapeError(ValueError):
    """
    Raised when a tensor's rank or axis sizes do not match what a
    preprocessor was configured for.

    Attributes
    ----------
    expected : str
        Human-readable description of the expected shape.
    actual : tuple[int, ...]
        Shape of the tensor that was received.
    """

    def __init__(
        self, expected: str, actual: Sequence[int], *, op: Optional[str] = None
    ) -> None:
        """
        Initialize the InvalidShapeError.

        Parameters
        ----------
        expected : str
            Description of the expected shape (e.g. "[N, 4, 2, 3, 3]").
        actual : Sequence[int]
            Shape that was actually received.
        op : Optional[str], optional
            Name of the operation that rejected the tensor.
        """
        actual = tuple(int(d) for d in actual)
        prefix = f"{op}: " if op else ""
        super().__init__(
            f"{prefix}invalid input array: expected shape {expected}, "
            f"but got {list(actual)}"
        )
        self.expected = expected
        self.actual = actual
        self.op = op


class InvalidInputTypeError(TypeError):
    """
    Raised when output-type inference receives a shape descriptor that is
    missing or of the wrong kind.

    Attributes
    ----------
    expected : str
        Name of the expected input-type kind (e.g. "CNN3D").
    actual : Any
        The input type that was received (may be None).
    """

    def __init__(self, expected: str, actual: Any, *, reason: str = "") -> None:
        """
        Initialize the InvalidInputTypeError.

        Parameters
        ----------
        expected : str
            Expected input-type kind or description.
        actual : Any
            The received input type, or None.
        reason : str, optional
            Extra detail appended to the message.
        """
        msg = f"Invalid input type: expected input of type {expected}, got {actual!r}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)
        self.expected = expected
        self.actual = actual
