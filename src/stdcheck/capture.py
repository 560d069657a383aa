"""Redirection of stdout/stderr into in-memory buffers for one test."""

from __future__ import annotations

import io
from contextlib import ExitStack, redirect_stderr, redirect_stdout
from contextvars import ContextVar, Token

_active_capture: ContextVar[StreamCapture | None] = ContextVar(
    "stdcheck_active_capture", default=None
)


def _drain(buffer: io.StringIO) -> str:
    text = buffer.getvalue()
    buffer.seek(0)
    buffer.truncate(0)
    return text


class StreamCapture:
    """Swap ``sys.stdout``/``sys.stderr`` for buffers while the block runs.

    The previous stream objects are restored on exit, whether the block
    finished normally or raised. While active, the capture is reachable
    through :func:`read_captured_output` and :func:`read_captured_errors`.
    """

    def __init__(self) -> None:
        self.stdout = io.StringIO()
        self.stderr = io.StringIO()
        self._stack: ExitStack | None = None
        self._token: Token | None = None

    def __enter__(self) -> StreamCapture:
        if self._stack is not None:
            raise RuntimeError("StreamCapture is already active")
        with ExitStack() as stack:
            stack.enter_context(redirect_stdout(self.stdout))
            stack.enter_context(redirect_stderr(self.stderr))
            self._token = _active_capture.set(self)
            stack.callback(_active_capture.reset, self._token)
            self._stack = stack.pop_all()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        stack, self._stack = self._stack, None
        self._token = None
        if stack is not None:
            stack.close()

    @property
    def active(self) -> bool:
        return self._stack is not None

    def read_stdout(self) -> str:
        """Return everything written to stdout since the last read, then clear it."""
        return _drain(self.stdout)

    def read_stderr(self) -> str:
        """Return everything written to stderr since the last read, then clear it."""
        return _drain(self.stderr)


def current_capture() -> StreamCapture:
    capture = _active_capture.get()
    if capture is None:
        raise RuntimeError("No output capture is active; call this from a running test")
    return capture


def read_captured_output() -> str:
    return current_capture().read_stdout()


def read_captured_errors() -> str:
    return current_capture().read_stderr()
