from .base import MovieStorage
from .json_file import JsonFileStorage

__all__ = [
    "MovieStorage",
    "JsonFileStorage",
]
