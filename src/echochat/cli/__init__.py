"""Command-line interface. Run with ``python -m echochat.cli``."""
