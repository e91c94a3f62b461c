"""Shared test fixtures.

Add fixtures here that are used across multiple test files.
"""

import io
from collections.abc import Callable

import pytest

from echochat.loop import EchoLoop


@pytest.fixture
def make_loop() -> Callable[..., tuple[EchoLoop, io.StringIO]]:
    """Build an EchoLoop fed with the given lines, plus its output buffer."""

    def factory(
        *lines: str, trailing_newline: bool = True, **kwargs: object
    ) -> tuple[EchoLoop, io.StringIO]:
        text = "\n".join(lines)
        if lines and trailing_newline:
            text += "\n"
        out = io.StringIO()
        return EchoLoop(io.StringIO(text), out, **kwargs), out  # type: ignore[arg-type]

    return factory
