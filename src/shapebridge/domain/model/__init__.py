from ._shape_config_mixin import ShapeConfigMixin

__all__ = [ShapeConfigMixin.__name__]
