from . import aff, dic

__all__ = [
    "aff",
    "dic"
]
