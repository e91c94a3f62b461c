"""Interactive echo chat loop.

Reads a line, answers with an acknowledgment that quotes the line verbatim,
and repeats until the user types ``exit`` or input runs out.

Structure:
- echochat/loop.py: The read-classify-respond cycle
- echochat/messages.py: User-visible message catalogs (en, ja)
- echochat/models.py: Loop state, chat messages, loop result
- echochat/config.py: Configuration via pydantic-settings
- echochat/errors.py: Exception hierarchy
- echochat/cli/: Command-line entry point
"""
