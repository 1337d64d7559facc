"""Assertions about the exceptions an operation raises.

Expected kinds match exactly: a subclass of the expected type is reported as
a mismatch, except in :func:`canceled` which accepts any cancellation error.
"""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, TypeVar, Union

from assertkit.cancellation import CancellationToken, OperationCanceled
from assertkit.diagnostics import render_result
from assertkit.errors import AssertionFailure, ResultAssertionFailure
from assertkit.runtime import ExpectedFailure, RuntimeVariant, resolve_variant, select

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=BaseException)

Action = Callable[[], Any]
AsyncOperation = Union[Callable[[], Awaitable[Any]], Awaitable[Any]]


def _type_name(kind: type) -> str:
    if kind.__module__ == "builtins":
        return kind.__qualname__
    return f"{kind.__module__}.{kind.__qualname__}"


def _fail(message: str) -> AssertionFailure:
    logger.debug(message)
    return AssertionFailure(message)


def _capture(action: Action) -> Exception | None:
    try:
        action()
    except Exception as exc:
        return exc
    return None


async def _capture_async(operation: AsyncOperation) -> Exception | None:
    try:
        awaitable = operation() if callable(operation) else operation
        await awaitable
    except Exception as exc:
        return exc
    return None


def _check_kind(kind: type[E], exc: Exception | None) -> E:
    if exc is None:
        raise _fail(f"Expected: {_type_name(kind)} -> Actual: No exception thrown")
    if type(exc) is not kind:
        raise _fail(
            f"Expected: {_type_name(kind)} -> Actual: ({_type_name(type(exc))}): {exc}"
        ) from exc
    return exc


def _check_param_name(exc: BaseException, expected_param_name: str | None) -> None:
    actual = getattr(exc, "param_name", None)
    if actual != expected_param_name:
        raise _fail(
            f"Parameter name differs\nExpected: {expected_param_name!r}\nActual:   {actual!r}"
        )


def throws(kind: type[E], action: Action) -> E:
    """Assert that ``action`` raises exactly ``kind`` and return the exception."""
    return _check_kind(kind, _capture(action))


def throws_message(kind: type[E], action: Action, expected_message: str) -> E:
    """Assert the exception kind and that its message equals ``expected_message``."""
    exc = throws(kind, action)
    if str(exc) != expected_message:
        raise _fail(f"Exception message differs\nExpected: {expected_message!r}\nActual:   {str(exc)!r}")
    return exc


def throws_contains(kind: type[E], action: Action, expected_content: str) -> E:
    """Assert the exception kind and that its message contains ``expected_content``."""
    exc = throws(kind, action)
    if expected_content not in str(exc):
        raise _fail(f"Exception message does not contain {expected_content!r}\nActual: {str(exc)!r}")
    return exc


def throws_param(kind: type[E], expected_param_name: str | None, action: Action) -> E:
    """Assert the exception kind and its ``param_name``."""
    exc = throws(kind, action)
    _check_param_name(exc, expected_param_name)
    return exc


def throws_variant(
    kind: type[E],
    action: Action,
    *,
    current_param: str | None,
    legacy_param: str | None,
    variant: RuntimeVariant | str | None = None,
) -> E:
    """Assert the exception kind and the parameter name the active variant uses.

    On the legacy variant a ``legacy_param`` of ``None`` skips the name check.
    """
    exc = throws(kind, action)
    active = resolve_variant(variant)
    if legacy_param is None and active is RuntimeVariant.LEGACY:
        return exc
    _check_param_name(exc, select(active, current_param, legacy_param))
    return exc


def throws_kind_variant(
    current: type[BaseException] | ExpectedFailure,
    legacy: type[BaseException] | ExpectedFailure,
    action: Action,
    *,
    variant: RuntimeVariant | str | None = None,
) -> BaseException:
    """Assert the exception the active variant is expected to raise.

    Each side is an exception type or an :class:`ExpectedFailure`; when the
    selected expectation names a parameter, it is checked as well.
    """
    expected = select(variant, current, legacy)
    if not isinstance(expected, ExpectedFailure):
        expected = ExpectedFailure(expected)
    exc = throws(expected.kind, action)
    if expected.param_name is not None:
        _check_param_name(exc, expected.param_name)
    return exc


def throws_any(action: Action, *kinds: type[BaseException]) -> Exception:
    """Assert that ``action`` raises exactly one of ``kinds``."""
    if not kinds:
        raise ValueError("throws_any requires at least one exception type")
    expected = ", ".join(_type_name(k) for k in kinds)
    exc = _capture(action)
    if exc is None:
        raise _fail(f"Expected one of: ({expected}) -> Actual: No exception thrown")
    if type(exc) not in kinds:
        raise _fail(f"Expected one of: ({expected}) -> Actual: ({_type_name(type(exc))}): {exc!r}") from exc
    return exc


def throws_if(kind: type[BaseException], condition: bool, action: Action) -> None:
    """Assert ``action`` raises ``kind`` when ``condition`` holds; otherwise just run it."""
    if condition:
        throws(kind, action)
    else:
        action()


def throws_returning(kind: type[E], func: Callable[[], Any], is_text: bool | None = None) -> E:
    """Assert that ``func`` raises ``kind``, reporting what it returned if it did not.

    ``is_text`` forces or suppresses quoting of the returned value; by default
    ``str`` results are quoted.
    """
    result: Any = None
    returned = False

    def invoke() -> None:
        nonlocal result, returned
        result = func()
        returned = True

    try:
        return throws(kind, invoke)
    except AssertionFailure as exc:
        if not returned:
            raise
        raise ResultAssertionFailure(render_result(result, is_text)) from exc


async def throws_async(kind: type[E], operation: AsyncOperation, expected_param_name: str | None = None) -> E:
    """Await ``operation`` once and assert it raises exactly ``kind``.

    ``operation`` is an awaitable or a zero-argument callable returning one.
    Cancellation of the awaiting task propagates unchanged.
    """
    exc = _check_kind(kind, await _capture_async(operation))
    if expected_param_name is not None:
        _check_param_name(exc, expected_param_name)
    return exc


def _check_canceled(token: CancellationToken, exc: Exception | None) -> OperationCanceled:
    if exc is None:
        raise _fail(f"Expected: {_type_name(OperationCanceled)} -> Actual: No exception thrown")
    if not isinstance(exc, OperationCanceled):
        raise _fail(
            f"Expected: {_type_name(OperationCanceled)} -> Actual: ({_type_name(type(exc))}): {exc}"
        ) from exc
    if token.can_be_canceled and exc.token != token:
        raise _fail(f"Cancellation token differs\nExpected: {token!r}\nActual:   {exc.token!r}")
    return exc


def canceled(token: CancellationToken, action: Action) -> OperationCanceled:
    """Assert ``action`` is cancelled, carrying ``token`` when it is cancellable."""
    return _check_canceled(token, _capture(action))


async def canceled_async(token: CancellationToken, operation: AsyncOperation) -> OperationCanceled:
    """Awaitable form of :func:`canceled`."""
    if operation is None:
        raise _fail("Expected: an awaitable operation\nActual: null")
    return _check_canceled(token, await _capture_async(operation))
