"""Rich Console that stays printable on non-UTF-8 terminals.

Validation errors embed a box-drawing indicator line; SafeConsole swaps
such glyphs for ASCII when the terminal can't encode them.
"""
from rich.console import Console
from rich.markup import escape
from typing import Any
from .logger import sanitize_for_terminal, is_utf8_capable


class SafeConsole(Console):
    """Console that sanitizes plain-string output for the current terminal."""

    def __init__(self, *args, **kwargs):
        self._needs_sanitization = not is_utf8_capable()

        if self._needs_sanitization:
            kwargs['legacy_windows'] = True

        super().__init__(*args, **kwargs)

    def print(self, *objects: Any, **kwargs) -> None:
        if self._needs_sanitization:
            objects = tuple(
                sanitize_for_terminal(obj, utf8=False) if isinstance(obj, str) else obj
                for obj in objects
            )
        super().print(*objects, **kwargs)

    def error(self, error: Exception) -> None:
        """Print an exception message unwrapped, so diagnostics keep their layout.

        Args:
            error: Exception whose message is shown after an ``Error:`` label
        """
        self.print(f"[bold red]Error:[/bold red] {escape(str(error))}", soft_wrap=True, highlight=False)
