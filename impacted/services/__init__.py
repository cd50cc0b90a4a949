"""Application services."""

from .detect import DetectionReport, DetectService
from .errors import DetectError

__all__ = ["DetectError", "DetectService", "DetectionReport"]
