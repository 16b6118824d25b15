"""Tests for the single-import CLI."""

import pytest
from typer.testing import CliRunner
from single_import.config import __version__
from single_import.main import app


@pytest.fixture
def runner():
    return CliRunner()


class TestParseCommand:
    """single-import parse"""

    def test_parse_abbreviated_statement(self, runner):
        result = runner.invoke(app, ["parse", "Button from './button'"])

        assert result.exit_code == 0
        assert "Button" in result.output
        assert "./button" in result.output
        assert "default" in result.output
        assert "import Button from './button';" in result.output

    def test_parse_typescript(self, runner):
        result = runner.invoke(app, ["parse", "type { Props } from './types'", "--language", "typescript"])

        assert result.exit_code == 0
        assert "Props" in result.output

    def test_parse_rejects_two_bindings(self, runner):
        result = runner.invoke(app, ["parse", "{ A, B } from 'mod'"])

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "Import 2 bindings: A, B" in result.output

    def test_parse_rejects_unknown_language(self, runner):
        result = runner.invoke(app, ["parse", "X from 'x'", "-l", "cobol"])

        assert result.exit_code == 1
        assert "Unsupported language: cobol" in result.output

    def test_verbose_reports_encoding(self, runner):
        result = runner.invoke(app, ["parse", "X from 'x'", "--verbose"])

        assert result.exit_code == 0
        assert "Terminal encoding" in result.output


class TestRenameCommand:
    """single-import rename"""

    def test_rename_named_import_adds_alias(self, runner):
        result = runner.invoke(app, ["rename", "{ useQuery } from '@apollo/react-hooks'", "useQuery2"])

        assert result.exit_code == 0
        assert "import { useQuery as useQuery2 } from '@apollo/react-hooks';" in result.output

    def test_rename_default_import(self, runner):
        result = runner.invoke(app, ["rename", "Button from './button'", "Button2"])

        assert result.exit_code == 0
        assert "import Button2 from './button';" in result.output

    def test_rename_to_invalid_identifier(self, runner):
        result = runner.invoke(app, ["rename", "Button from './button'", "my-button"])

        assert result.exit_code == 1
        assert "Bad import statement" in result.output

    def test_rename_invalid_statement(self, runner):
        result = runner.invoke(app, ["rename", "const x = 1;", "y"])

        assert result.exit_code == 1
        assert "Error:" in result.output


def test_version(runner):
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert f"single-import {__version__}" in result.output
