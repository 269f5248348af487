# src/sift/core/errors.py
from typing import Any, Iterable, List


class SiftError(Exception):
    """Base class for every error raised by sift."""


class UnsupportedOperator(SiftError, ValueError):
    """Raised when an operator kind is not one of the known kinds."""

    def __init__(self, kind: Any, valid_kinds: Iterable[Any]):
        self.kind = kind
        self.valid_kinds: List[Any] = list(valid_kinds)
        allowed = '", "'.join(str(getattr(k, "value", k)) for k in self.valid_kinds)
        super().__init__(
            f'The type "{kind}" is not supported, allowed ones are "{allowed}".'
        )
