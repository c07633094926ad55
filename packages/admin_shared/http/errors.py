"""Typed error for completed HTTP exchanges that returned a failure status."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .response import HttpResponse


@dataclass(frozen=True)
class HttpError(Exception):
    """Non-2xx response that survived the retry policy.

    Carries no service semantics; callers translate it through their own
    error table using ``response.status`` and ``response.data``.
    """

    response: HttpResponse
    message: str = field(default="")

    def __post_init__(self) -> None:
        if not self.message:
            object.__setattr__(
                self, "message", f"Server responded with status {self.response.status}."
            )

    def __str__(self) -> str:
        """Return the human-readable error message."""
        return self.message

    @property
    def status(self) -> int:
        """Return the HTTP status of the failing response."""
        return self.response.status
