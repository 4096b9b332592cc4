"""
Shape configuration mixin.

This module defines `ShapeConfigMixin`, a helper mixin for preprocessors
whose behavior is fully determined by a handful of immutable integer and
boolean fields.

Host classes are frozen dataclasses that declare `_CONFIG_KEYS`, a mapping
from attribute name to the (camelCase) key used in serialized configuration
records. The mixin derives JSON export, reconstruction, cloning and
dimension validation from that mapping, so every preprocessor serializes the
same way without per-class boilerplate.
"""

from __future__ import annotations

import dataclasses
import numbers
from typing import Any, ClassVar, Dict, Tuple

from typing_extensions import Self


class ShapeConfigMixin:
    """
    Mixin providing configuration hooks for shape-only components.

    Class attributes
    ----------------
    _CONFIG_KEYS : dict[str, str]
        Attribute name -> serialized key, e.g. ``{"input_depth": "inputDepth"}``.
    _DIMENSION_FIELDS : tuple[str, ...]
        Attributes that must be positive integers.
    """

    _CONFIG_KEYS: ClassVar[Dict[str, str]] = {}
    _DIMENSION_FIELDS: ClassVar[Tuple[str, ...]] = ()

    def _validate_dimensions(self) -> None:
        for attr in self._DIMENSION_FIELDS:
            value = getattr(self, attr)
            if (
                isinstance(value, bool)
                or not isinstance(value, numbers.Integral)
                or value <= 0
            ):
                raise ValueError(
                    f"{type(self).__name__}.{attr} must be a positive integer, "
                    f"got {value!r}"
                )
            # NumPy integer scalars are stored as plain ints (frozen host).
            object.__setattr__(self, attr, int(value))

    def get_config(self) -> Dict[str, Any]:
        """
        Return a JSON-serializable configuration dictionary.

        Returns
        -------
        Dict[str, Any]
            Flat record keyed by the serialized field names.
        """
        return {key: getattr(self, attr) for attr, key in self._CONFIG_KEYS.items()}

    @classmethod
    def from_config(cls, cfg: Dict[str, Any]) -> Self:
        """
        Reconstruct an instance from a configuration dictionary.

        Keys for fields that have a default may be omitted.

        Raises
        ------
        KeyError
            If a required field is missing from `cfg`.
        """
        defaults = {
            f.name: f.default
            for f in dataclasses.fields(cls)  # type: ignore[arg-type]
            if f.default is not dataclasses.MISSING
        }
        kwargs: Dict[str, Any] = {}
        for attr, key in cls._CONFIG_KEYS.items():
            if key in cfg:
                kwargs[attr] = cfg[key]
            elif attr not in defaults:
                raise KeyError(f"{cls.__name__} config is missing required key '{key}'")
        return cls(**kwargs)

    def clone(self) -> Self:
        """
        Return an independent copy with identical field values.
        """
        return dataclasses.replace(self)  # type: ignore[type-var]
