from .gradient1d import gradient

__all__ = ["gradient"]
