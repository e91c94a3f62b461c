"""The interactive echo loop.

One cycle per input line:
1. Write the prompt (no newline) and block on ``readline()``
2. Classify the line: exit sentinel, empty, or text
3. Write the matching response and go again

The loop stops on the exit sentinel (after a goodbye line) or on
end-of-input (silently). Streams are injected, so tests can feed a
``StringIO`` and read back what was written.

Example:
    import io

    from echochat.loop import run_loop

    out = io.StringIO()
    result = run_loop(io.StringIO("hello\\nexit\\n"), out)
    result.exit_reason  # ExitReason.SENTINEL
"""

import logging
from typing import TextIO

from echochat.errors import LoopTerminatedError
from echochat.messages import ENGLISH, EXIT_SENTINEL, Catalog
from echochat.models import ChatMessage, ExitReason, InputKind, LoopResult, LoopState

logger = logging.getLogger(__name__)


def classify(line: str) -> InputKind:
    """Classify a line with its newline already removed."""
    if line == EXIT_SENTINEL:
        return InputKind.EXIT
    if not line:
        return InputKind.EMPTY
    return InputKind.TEXT


class EchoLoop:
    """Read-classify-respond cycle over a pair of text streams."""

    def __init__(
        self,
        stdin: TextIO,
        stdout: TextIO,
        catalog: Catalog = ENGLISH,
        *,
        keep_transcript: bool = False,
    ) -> None:
        self.stdin = stdin
        self.stdout = stdout
        self.catalog = catalog
        self.keep_transcript = keep_transcript
        self.state = LoopState.AWAITING_INPUT

    def _write_line(self, text: str) -> None:
        self.stdout.write(f"{text}\n")

    def _read_line(self) -> str | None:
        """Prompt and read one line. None means end-of-input."""
        self.stdout.write(self.catalog.prompt)
        self.stdout.flush()
        raw = self.stdin.readline()
        if not raw:
            return None
        return raw.removesuffix("\n")

    def respond(self, line: str) -> str | None:
        """Build the response for a line, or None for the exit sentinel."""
        kind = classify(line)
        if kind is InputKind.EXIT:
            return None
        if kind is InputKind.EMPTY:
            return self.catalog.empty
        return self.catalog.render_response(line)

    def run(self) -> LoopResult:
        """Run until the exit sentinel or end-of-input.

        Returns:
            LoopResult with the exit reason. The transcript is only filled
            when the loop was built with ``keep_transcript=True``; otherwise
            no line outlives its own iteration.

        Raises:
            LoopTerminatedError: If this loop has already terminated.
        """
        if self.state is LoopState.TERMINATED:
            raise LoopTerminatedError("echo loop has already terminated")

        self._write_line(self.catalog.welcome)
        self._write_line(self.catalog.render_instructions())
        logger.info("Echo loop started")

        transcript: list[ChatMessage] = []
        turns = 0

        while True:
            line = self._read_line()
            if line is None:
                reason = ExitReason.END_OF_INPUT
                break

            logger.debug("Read line %d (%d chars)", turns + 1, len(line))
            reply = self.respond(line)
            if reply is None:
                self._write_line(self.catalog.goodbye)
                reason = ExitReason.SENTINEL
                break

            self._write_line(reply)
            if self.keep_transcript:
                transcript.append(ChatMessage.user(line))
                transcript.append(ChatMessage.assistant(reply))
            turns += 1

        self.stdout.flush()
        self.state = LoopState.TERMINATED
        logger.info("Echo loop terminated (%s) after %d turns", reason, turns)

        return LoopResult(exit_reason=reason, turns=turns, transcript=transcript)


def run_loop(
    stdin: TextIO,
    stdout: TextIO,
    catalog: Catalog = ENGLISH,
    *,
    keep_transcript: bool = False,
) -> LoopResult:
    """Run a fresh echo loop over the given streams."""
    return EchoLoop(stdin, stdout, catalog, keep_transcript=keep_transcript).run()
