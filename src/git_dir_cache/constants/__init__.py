from . import defaults, filenames, keys

__all__ = ["defaults", "filenames", "keys"]
