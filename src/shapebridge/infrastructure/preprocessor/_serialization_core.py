from __future__ import annotations

import json
import logging
from typing import Any, Callable, Optional, Type

logger = logging.getLogger(__name__)

_PREPROCESSOR_REGISTRY: dict[str, Type[Any]] = {}


def register_preprocessor(
    name: Optional[str] = None,
) -> Callable[[Type[Any]], Type[Any]]:
    """
    Decorator to register a preprocessor class for JSON deserialization.
    """

    def deco(cls: Type[Any]) -> Type[Any]:
        key = name or cls.__name__
        _PREPROCESSOR_REGISTRY[key] = cls
        return cls

    return deco


def registered_preprocessors() -> dict[str, Type[Any]]:
    return dict(_PREPROCESSOR_REGISTRY)


def preprocessor_to_config(p: Any) -> dict[str, Any]:
    """
    Convert a preprocessor into a JSON-serializable node.

    Node format
    -----------
    {
      "type": "Cnn3DToFeedForwardPreProcessor",
      "config": {"inputDepth": 2, "inputHeight": 3, ...}
    }
    """
    get_cfg = getattr(p, "get_config", None)
    cfg = get_cfg() if callable(get_cfg) else {}
    return {"type": p.__class__.__name__, "config": cfg}


def preprocessor_from_config(node: dict[str, Any]) -> Any:
    """
    Rebuild a preprocessor from a configuration node.
    """
    type_name = str(node["type"])
    if type_name not in _PREPROCESSOR_REGISTRY:
        raise ValueError(
            f"Unknown preprocessor type '{type_name}'. "
            f"Register it via @register_preprocessor."
        )

    cls = _PREPROCESSOR_REGISTRY[type_name]
    cfg = node.get("config", {}) or {}
    logger.debug("Rebuilding %s from config %s", type_name, cfg)

    from_cfg = getattr(cls, "from_config", None)
    if callable(from_cfg):
        return from_cfg(cfg)
    return cls(**cfg)


def preprocessor_to_json(p: Any, *, indent: Optional[int] = None) -> str:
    return json.dumps(preprocessor_to_config(p), indent=indent, sort_keys=True)


def preprocessor_from_json(text: str) -> Any:
    return preprocessor_from_config(json.loads(text))
