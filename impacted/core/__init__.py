"""Core types shared by every layer."""

from .config import DetectInputs
from .errors import ErrorCode
from .result import Err, Ok, Result

__all__ = [
    # config
    "DetectInputs",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
]
