from . import ensure, key

__all__ = ["ensure", "key"]
