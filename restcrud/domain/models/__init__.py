"""Domain model package.

Import from this package to avoid coupling application code to individual
module paths.
"""

from .base import CrudModel, pack
from .enums import ErrorKind, HttpMethod, ParameterEncoding, SortDirection
from .parameters import Parameters

__all__ = [
    "CrudModel",
    "ErrorKind",
    "HttpMethod",
    "ParameterEncoding",
    "Parameters",
    "SortDirection",
    "pack",
]
