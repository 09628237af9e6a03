from .parts import PartsHeader

__all__ = ["PartsHeader"]
