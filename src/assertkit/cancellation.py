"""Cooperative cancellation handles."""

from __future__ import annotations

import threading


class OperationCanceled(Exception):
    """An operation observed a cancellation request.

    ``token`` is the handle that was cancelled, or ``None`` when unknown.
    """

    def __init__(self, message: str = "The operation was canceled.", token: CancellationToken | None = None):
        super().__init__(message)
        self.token = token


class TaskCanceled(OperationCanceled):
    def __init__(self, message: str = "A task was canceled.", token: CancellationToken | None = None):
        super().__init__(message, token)


class CancellationToken:
    """Read side of a cancellation request.

    A token without a source can never be cancelled; see :meth:`none`.
    """

    def __init__(self, source: CancellationTokenSource | None = None):
        self._source = source

    @classmethod
    def none(cls) -> CancellationToken:
        return cls()

    @property
    def can_be_canceled(self) -> bool:
        return self._source is not None

    @property
    def is_cancellation_requested(self) -> bool:
        return self._source is not None and self._source.is_cancellation_requested

    def throw_if_cancellation_requested(self) -> None:
        if self.is_cancellation_requested:
            raise OperationCanceled(token=self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CancellationToken):
            return NotImplemented
        return self._source is other._source

    def __hash__(self) -> int:
        return id(self._source)

    def __repr__(self) -> str:
        return f"CancellationToken(can_be_canceled={self.can_be_canceled}, requested={self.is_cancellation_requested})"


class CancellationTokenSource:
    def __init__(self) -> None:
        self._event = threading.Event()
        self.token = CancellationToken(self)

    @property
    def is_cancellation_requested(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()
