"""Terminal-safe output with ASCII fallback for diagnostics.

Import diagnostics draw an indicator line with box-drawing characters. On
terminals that can't encode them (legacy Windows consoles, ASCII locales)
those glyphs are replaced with ASCII equivalents before printing.
"""
import sys
import locale


# Unicode to ASCII icon mapping for non-UTF-8 terminals
ICON_MAP = {
    # Status icons
    '✓': '[OK]',
    '✔': '[OK]',
    '✗': '[FAIL]',
    '✘': '[FAIL]',
    '⚠': '[WARN]',

    # Arrows
    '→': '->',
    '←': '<-',
    '↓': 'v',

    # Diagnostic indicator line
    '─': '-',
    '│': '|',

    '…': '...',
}

ASCII_TABLE = str.maketrans(ICON_MAP)


def detect_terminal_encoding() -> str:
    """Detect the terminal's encoding capability.

    Returns:
        str: Terminal encoding ('utf-8', 'cp1252', 'ascii', etc.)
    """
    if hasattr(sys.stdout, 'encoding') and sys.stdout.encoding:
        return sys.stdout.encoding.lower()

    try:
        return locale.getpreferredencoding().lower()
    except (LookupError, ValueError):
        return 'ascii'


def is_utf8_capable() -> bool:
    """Check if the terminal can handle UTF-8 Unicode characters."""
    return detect_terminal_encoding().replace('_', '-') in ('utf-8', 'utf8')


def sanitize_for_terminal(text: str, utf8: bool = None) -> str:
    """Replace Unicode glyphs with ASCII equivalents if the terminal needs it.

    Args:
        text: Text potentially containing Unicode glyphs
        utf8: Override terminal detection

    Returns:
        str: Sanitized text safe for current terminal
    """
    if utf8 is None:
        utf8 = is_utf8_capable()
    if utf8:
        return text
    return text.translate(ASCII_TABLE)


def safe_print(*args, **kwargs):
    """print() with string arguments passed through sanitize_for_terminal."""
    utf8 = is_utf8_capable()
    print(*(sanitize_for_terminal(arg, utf8) if isinstance(arg, str) else arg for arg in args), **kwargs)


def log_encoding_status():
    """Log the detected terminal encoding status (for debugging)."""
    encoding = detect_terminal_encoding()
    status = "UTF-8 capable" if is_utf8_capable() else f"Non-UTF-8 ({encoding})"
    safe_print(f"[Terminal encoding: {status}]")
