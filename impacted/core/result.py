"""Result type for explicit error handling at I/O seams.

Loaders and adapters return ``Ok(value)`` or ``Err(error)`` instead of raising,
so the detection service decides which failures abort the run and which are
only reported as warnings.

Usage:
    match load_manifest(path):
        case Ok(manifest):
            universe = manifest.universe
        case Err(error):
            console.error(error.message)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")

__all__ = ["Ok", "Err", "Result"]


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successful result.

    Attributes:
        value: The success value.
    """

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """A failed result.

    Attributes:
        error: The error value.
    """

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result = Ok[T] | Err[E]
