from .file_reader import FileReader
from .aff import read_aff
from .dic import read_dic

__all__ = [
    "FileReader",
    "read_aff",
    "read_dic"
]
