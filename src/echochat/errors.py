"""Exceptions raised by echochat."""


class EchoChatError(Exception):
    """Base class for echochat errors."""


class LoopTerminatedError(EchoChatError, RuntimeError):
    """Raised when a loop that already terminated is run again."""


class UnknownLanguageError(EchoChatError, KeyError):
    """Raised when no message catalog exists for a language code."""
