"""Per-task logging context for outgoing request fields.

Values live in a ``ContextVar`` so each asyncio task, and each thread, sees its
own copy while a ``send`` is in flight. All values are stored as strings.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from contextvars import ContextVar, Token

_REQUEST_CONTEXT: ContextVar[Mapping[str, str]] = ContextVar(
    "admin_request_log_context", default={}
)


def _replace(update: Callable[[dict[str, str]], None]) -> None:
    values = dict(_REQUEST_CONTEXT.get())
    update(values)
    _REQUEST_CONTEXT.set(values)


def get_context() -> dict[str, str]:
    """Return a copy of the fields bound in the current context."""
    return dict(_REQUEST_CONTEXT.get())


def bind_context(**values: object) -> None:
    """Add fields to the current context, skipping ``None`` values."""
    bound = {key: str(value) for key, value in values.items() if value is not None}
    if bound:
        _replace(lambda current: current.update(bound))


def clear_context(*keys: str) -> None:
    """Drop ``keys`` from the context, or every field when none are given."""
    if not keys:
        _REQUEST_CONTEXT.set({})
        return

    def drop(current: dict[str, str]) -> None:
        for key in keys:
            current.pop(key, None)

    _replace(drop)


class log_context:
    """Bind ``values`` for the duration of a ``with`` block.

    Fields bound inside the block, including by ``bind_context``, are discarded
    on exit and the outer context is restored.
    """

    def __init__(self, values: Mapping[str, object]) -> None:
        self._values = dict(values)
        self._token: Token[Mapping[str, str]] | None = None

    def __enter__(self) -> None:
        self._token = _REQUEST_CONTEXT.set(_REQUEST_CONTEXT.get())
        bind_context(**self._values)

    def __exit__(self, *_: object) -> None:
        if self._token is not None:
            _REQUEST_CONTEXT.reset(self._token)
            self._token = None
