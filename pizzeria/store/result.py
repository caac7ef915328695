"""
Store Results

Every Store operation returns ``Ok(value)`` or ``Err(failure)`` instead of
raising, so database failures are part of each call's contract.
"""

from dataclasses import dataclass
from typing import Any

from pizzeria.errors import StoreError


@dataclass(frozen=True)
class StoreFailure:
    """What went wrong; ``detail`` is for logs, never for API responses."""
    operation: str
    detail: str


@dataclass(frozen=True)
class Ok:
    value: Any = None

    ok = True

    def unwrap(self):
        return self.value


@dataclass(frozen=True)
class Err:
    failure: StoreFailure

    ok = False

    def unwrap(self):
        """Raise the API error handlers turn into a 500 response."""
        raise StoreError()
