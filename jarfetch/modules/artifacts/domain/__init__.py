from .artifact import Coordinate

__all__ = ["Coordinate"]
