from .basic_entity import BasicEntity

__all__ = ["BasicEntity"]
