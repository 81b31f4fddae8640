"""Utility functions for the orchestrator."""
import logging

from rich.console import Console
from rich.logging import RichHandler

console = Console()
error_console = Console(stderr=True)


def configure_logging(verbose: bool) -> None:
    """Route log records through rich on the shared console.

    Args:
        verbose: Show debug records (including raw LLM replies) instead of info and above
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )
    # Keep third-party HTTP chatter out of the output.
    for noisy in ("httpx", "httpcore", "openai"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
