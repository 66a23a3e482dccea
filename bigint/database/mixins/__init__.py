from .saveable import Saveable

__all__ = ["Saveable"]
