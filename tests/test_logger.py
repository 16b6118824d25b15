"""Tests for terminal glyph sanitization."""

from single_import.utils import logger
from single_import.utils.logger import ICON_MAP, log_encoding_status, sanitize_for_terminal


def test_indicator_line_becomes_ascii():
    assert sanitize_for_terminal('───v', utf8=False) == '---v'


def test_status_icons_become_ascii():
    assert sanitize_for_terminal('✓ Button → Button2', utf8=False) == '[OK] Button -> Button2'


def test_utf8_terminal_is_untouched():
    assert sanitize_for_terminal('───v', utf8=True) == '───v'


def test_ascii_replacements_are_ascii():
    for replacement in ICON_MAP.values():
        assert replacement.isascii()


def test_log_encoding_status_non_utf8(monkeypatch, capsys):
    monkeypatch.setattr(logger, 'detect_terminal_encoding', lambda: 'cp1252')
    log_encoding_status()
    assert 'Non-UTF-8 (cp1252)' in capsys.readouterr().out


def test_log_encoding_status_utf8(monkeypatch, capsys):
    monkeypatch.setattr(logger, 'detect_terminal_encoding', lambda: 'utf-8')
    log_encoding_status()
    assert 'UTF-8 capable' in capsys.readouterr().out


def test_safe_print_sanitizes_strings_only(monkeypatch, capsys):
    monkeypatch.setattr(logger, 'detect_terminal_encoding', lambda: 'ascii')
    logger.safe_print('──v', 3)
    assert capsys.readouterr().out == '--v 3\n'


def test_safe_console_error_keeps_message_on_one_line(capsys):
    from single_import.utils.safe_console import SafeConsole

    console = SafeConsole(width=20, force_terminal=False, color_system=None)
    console.error(ValueError('[bold] a message much longer than twenty columns'))
    out = capsys.readouterr().out
    assert out == 'Error: [bold] a message much longer than twenty columns\n'
