"""Static import statements that introduce exactly one binding.

ImportStatement is what a code generator holds for each "I need binding X from
module Y" request. The statement text carries everything needed to manage the
import: the module path, the export being imported, and the local binding it
is bound to. That is enough to deduplicate imports and resolve scope conflicts.

Example: two generated imports want the same local name::

    first = ImportStatement("Button from 'vendor/button'")
    second = ImportStatement("Button from 'different-vendor'")
    if first.binding == second.binding and first.source != second.source:
        second = second.change_binding('Button2')

The renamed statement is a new, fully re-validated instance. Because
``str(statement)`` is its binding, generated code can interpolate the
statement itself wherever the local name is needed::

    jsx = f"<{second}>hello world</{second}>"

Only one binding per statement is allowed. ``{ Button as VeniaButton } from
'@magento/venia'`` is fine, while ``{ Button as VeniaButton, Carousel } from
'@magento/venia'`` adds two bindings and is rejected.
"""
import re
from typing import Optional

from single_import.analyzer.parser import (
    DEFAULT,
    IMPORT_STATEMENT,
    NAMESPACE,
    NAMED,
    StatementNode,
    StatementSyntaxError,
    parse_statement,
)
from single_import.config import get_config


MDN_IMPORT_URL = 'https://developer.mozilla.org/en-US/docs/Web/JavaScript/Reference/Statements/import'

INDICATOR = '─'
MARKER = 'v'

_IMPORT_KEYWORD = re.compile(r'import(?![\w$])')


class ImportValidationError(ValueError):
    """Raised for every way a statement can fail to be a single-binding import.

    Attributes:
        statement: The exact value the caller passed in
        details: Explanation of what was wrong, if known
        position: Character offset of a syntax error, if any
    """

    def __init__(self, statement, details: Optional[str] = None, position: Optional[int] = None):
        self.statement = statement
        self.details = details
        self.position = position

        msg = (
            f"Bad import statement: {statement!r}. ImportStatement must be an "
            f"ES Module static import statement of the form specified at "
            f"{MDN_IMPORT_URL}, which imports exactly one binding."
        )
        super().__init__(f"{msg} \n\nDetails: {details}" if details else msg)


def normalize_statement(statement) -> str:
    """Coerce caller text into one complete, terminated import declaration.

    Accepts the terse form ``"X from 'x'"`` as well as a full statement.

    Raises:
        ImportValidationError: If statement is not a string
    """
    if not isinstance(statement, str):
        raise ImportValidationError(statement)

    text = statement.strip()

    # line breaks are not guaranteed between generated statements
    if not text.endswith(';'):
        text += ';'

    if not _IMPORT_KEYWORD.match(text):
        text = f"import {text}"

    return text + '\n'


def format_diagnostic(message: str, statement: str, pos: int) -> str:
    """Point a marker at ``pos`` above the statement text."""
    indicator = INDICATOR * pos
    return f"{message}\n\t{indicator}{MARKER}\n\t{statement}"


class ImportStatement:
    """A validated static import statement with exactly one local binding."""

    __slots__ = ('_original_statement', '_statement', '_language', '_node')

    def __init__(self, statement: str, language: Optional[str] = None):
        """Normalize, parse and validate an import statement.

        Args:
            statement: Full import statement, or the part after ``import``
            language: Grammar to parse with; defaults to the configured language

        Raises:
            ImportValidationError: If the text is not a single-binding static import
        """
        self._original_statement = statement
        self._statement = normalize_statement(statement)
        self._language = language.strip().lower() if language else get_config().language
        self._node = self._parse()

    @property
    def original_statement(self):
        return self._original_statement

    @property
    def statement(self) -> str:
        """Normalized statement text, ending in ``;`` and a single line break."""
        return self._statement

    @property
    def language(self) -> str:
        return self._language

    @property
    def node(self) -> StatementNode:
        return self._node

    @property
    def binding(self) -> str:
        """Local name the statement introduces into the generated scope."""
        return self._node.specifiers[0].local.name

    @property
    def source(self) -> str:
        return self._node.source

    @property
    def imported(self) -> str:
        """Export being imported: ``'default'``, ``'*'`` or a named export."""
        specifier = self._node.specifiers[0]
        if specifier.kind == NAMESPACE:
            return '*'
        if specifier.kind == DEFAULT:
            return 'default'
        return specifier.imported.name

    def change_binding(self, new_binding: str) -> 'ImportStatement':
        """Return a copy of this statement whose binding is ``new_binding``.

        A named import without an alias gets one, so the imported name is kept:
        ``{ useQuery }`` becomes ``{ useQuery as useQuery2 }``. Otherwise the
        local identifier is replaced in place.

        Args:
            new_binding: New local name; should be a valid identifier

        Returns:
            New ImportStatement parsed from the rewritten text

        Raises:
            ImportValidationError: If the rewritten text does not validate
        """
        if not isinstance(new_binding, str):
            raise ImportValidationError(
                self._original_statement,
                f"New binding must be a string, got {new_binding!r}"
            )

        specifier = self._node.specifiers[0]
        start, end = specifier.local.start, specifier.local.end
        replacement = new_binding

        if specifier.kind == NAMED and not specifier.aliased:
            # zero-width insertion right after the imported name
            start = end = specifier.imported.end
            replacement = f" as {new_binding}"

        text = self._statement[:start] + replacement + self._statement[end:]
        return ImportStatement(text, language=self._language)

    def _parse(self) -> StatementNode:
        """Parse the normalized statement and enforce the single-binding rule."""
        try:
            node = parse_statement(self._statement, self._language)
        except StatementSyntaxError as e:
            raise ImportValidationError(
                self._original_statement,
                format_diagnostic(str(e), self._statement, e.pos),
                position=e.pos
            ) from e

        if node is None or node.type != IMPORT_STATEMENT:
            node_type = node.type if node else None
            raise ImportValidationError(
                self._original_statement,
                f"Node type was {node_type}"
            )

        bindings = [specifier.local.name for specifier in node.specifiers]
        if len(bindings) != 1:
            raise ImportValidationError(
                self._original_statement,
                f"Import {len(bindings)} bindings: {', '.join(bindings)}. "
                f"Imports for these targets must have exactly one binding, "
                f"which will be used in generated code."
            )

        return node

    def __str__(self) -> str:
        return self.binding

    def __repr__(self) -> str:
        return f"ImportStatement({self._statement.rstrip()!r}, binding={self.binding!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, ImportStatement):
            return NotImplemented
        return self._statement == other._statement and self._language == other._language

    def __hash__(self) -> int:
        return hash((self._statement, self._language))
