"""Tree-sitter parser for single ECMAScript module statements."""
from dataclasses import dataclass
from typing import Dict, Optional, Tuple
from tree_sitter import Language, Node, Parser
import tree_sitter_javascript as tsjavascript
import tree_sitter_typescript as tstypescript


DEFAULT = 'default'
NAMESPACE = 'namespace'
NAMED = 'named'

IMPORT_STATEMENT = 'import_statement'

# Accepted as identifiers by the grammar, but not as bindings in module code
MODULE_RESERVED_WORDS = frozenset({
    'await', 'yield', 'let', 'static', 'enum', 'implements', 'interface',
    'package', 'private', 'protected', 'public', 'arguments', 'eval',
})

SINGLE_ESCAPES = {
    'n': '\n',
    't': '\t',
    'r': '\r',
    'b': '\b',
    'f': '\f',
    'v': '\v',
    '0': '\0',
}
LINE_CONTINUATIONS = ('\n', '\r\n', '\r', '\u2028', '\u2029')


class StatementSyntaxError(ValueError):
    """Raised when the statement text does not parse in module grammar.

    Attributes:
        pos: Character offset of the first error in the parsed text
    """

    def __init__(self, message: str, pos: int):
        super().__init__(message)
        self.pos = pos


@dataclass(frozen=True)
class Identifier:
    name: str
    start: int
    end: int


@dataclass(frozen=True)
class ImportSpecifier:
    """One binding introduced by an import declaration.

    For a named specifier without an ``as`` clause, ``local`` and ``imported``
    cover the same span of text.
    """
    kind: str
    local: Identifier
    imported: Optional[Identifier] = None

    @property
    def aliased(self) -> bool:
        return self.kind == NAMED and self.imported.start != self.local.start


@dataclass(frozen=True)
class StatementNode:
    type: str
    start: int
    end: int
    specifiers: Tuple[ImportSpecifier, ...] = ()
    source: Optional[str] = None


class LanguageParser:
    """Statement parser using tree-sitter v0.22+ API."""

    SUPPORTED_LANGUAGES = ('javascript', 'typescript', 'tsx')

    _languages: Dict[str, Language] = {}

    def __init__(self, language: str):
        """Initialize parser for given language (javascript, typescript, tsx).

        Args:
            language: One of 'javascript', 'typescript', 'tsx'

        Raises:
            ValueError: If language is not supported
        """
        self.language = language
        self.parser = Parser(self._load_language(language))

    @classmethod
    def _load_language(cls, language: str) -> Language:
        """Wrap the grammar capsule once per language.

        Returns:
            Language instance shared by every parser of that dialect

        Raises:
            ValueError: If language is not supported
        """
        if language not in cls._languages:
            if language == 'javascript':
                lang = Language(tsjavascript.language())
            elif language == 'typescript':
                lang = Language(tstypescript.language_typescript())
            elif language == 'tsx':
                lang = Language(tstypescript.language_tsx())
            else:
                raise ValueError(f"Unsupported language: {language}")
            cls._languages[language] = lang
        return cls._languages[language]

    def parse_statement(self, text: str) -> Optional[StatementNode]:
        """Parse text and describe its first top-level statement.

        Args:
            text: Source text of one module statement

        Returns:
            StatementNode for the first statement, or None if there is none

        Raises:
            StatementSyntaxError: If the text contains a syntax error
        """
        source_bytes = text.encode('utf-8')
        tree = self.parser.parse(source_bytes)
        root = tree.root_node

        if root.has_error:
            raise self._syntax_error(root, source_bytes)

        statement = next(
            (child for child in root.named_children if child.type != 'comment'),
            None
        )
        if statement is None:
            return None

        def offset(byte_offset: int) -> int:
            return len(source_bytes[:byte_offset].decode('utf-8'))

        if statement.type != IMPORT_STATEMENT:
            return StatementNode(
                type=statement.type,
                start=offset(statement.start_byte),
                end=offset(statement.end_byte)
            )

        specifiers = tuple(self._specifiers(statement, offset))
        for specifier in specifiers:
            if specifier.local.name in MODULE_RESERVED_WORDS:
                raise StatementSyntaxError(
                    f"Binding {specifier.local.name!r} is a reserved word in module code",
                    specifier.local.start
                )

        return StatementNode(
            type=statement.type,
            start=offset(statement.start_byte),
            end=offset(statement.end_byte),
            specifiers=specifiers,
            source=self._string_value(statement.child_by_field_name('source'))
        )

    def _specifiers(self, statement: Node, offset):
        """Yield an ImportSpecifier per binding in the import clause."""

        def identifier(node: Node) -> Identifier:
            if node.type == 'string':
                name = self._string_value(node)
            else:
                name = node.text.decode('utf-8')
            return Identifier(name, offset(node.start_byte), offset(node.end_byte))

        for clause in statement.named_children:
            if clause.type != 'import_clause':
                continue

            for child in clause.named_children:
                # import x from 'mod'
                if child.type == 'identifier':
                    yield ImportSpecifier(DEFAULT, identifier(child))

                # import * as ns from 'mod'
                elif child.type == 'namespace_import':
                    for ns_child in child.named_children:
                        if ns_child.type == 'identifier':
                            yield ImportSpecifier(NAMESPACE, identifier(ns_child))

                # import { x, y as z } from 'mod'
                elif child.type == 'named_imports':
                    for specifier in child.named_children:
                        if specifier.type != 'import_specifier':
                            continue
                        imported = identifier(specifier.child_by_field_name('name'))
                        alias_node = specifier.child_by_field_name('alias')
                        local = identifier(alias_node) if alias_node else imported
                        yield ImportSpecifier(NAMED, local, imported)

    @staticmethod
    def _string_value(node: Optional[Node]) -> Optional[str]:
        """Value of a string literal, with escape sequences decoded."""
        if node is None:
            return None

        parts = []
        for child in node.named_children:
            text = child.text.decode('utf-8')
            if child.type == 'escape_sequence':
                parts.append(decode_escape(text))
            elif child.type == 'string_fragment':
                parts.append(text)

        # \uD83D\uDE00 style pairs decode to lone surrogates; recombine them
        value = ''.join(parts)
        return value.encode('utf-16', 'surrogatepass').decode('utf-16', 'surrogatepass')

    @staticmethod
    def _syntax_error(root: Node, source_bytes: bytes) -> StatementSyntaxError:
        """Build a StatementSyntaxError pointing at the first ERROR or MISSING node."""
        node = root
        while node.type != 'ERROR' and not node.is_missing:
            node = next((child for child in node.children if child.has_error), None)
            if node is None:
                break

        if node is None:
            pos = len(source_bytes.decode('utf-8').rstrip())
            return StatementSyntaxError("Unexpected end of input", pos)

        pos = len(source_bytes[:node.start_byte].decode('utf-8'))
        line = node.start_point[0] + 1
        column = node.start_point[1]
        if node.is_missing:
            message = f"Missing {node.type!r} ({line}:{column})"
        else:
            token = source_bytes[node.start_byte:node.end_byte].decode('utf-8').strip()
            message = f"Unexpected token {token!r} ({line}:{column})"
        return StatementSyntaxError(message, pos)


def decode_escape(sequence: str) -> str:
    """Decode one string escape sequence such as ``\\'``, ``\\x41`` or ``\\u{1F600}``."""
    body = sequence[1:]
    if body in LINE_CONTINUATIONS:
        return ''
    if body.startswith('u{'):
        return chr(int(body[2:-1], 16))
    if body[0] in 'ux' and len(body) > 1:
        return chr(int(body[1:], 16))
    if len(body) > 1 and all(c in '01234567' for c in body):
        # legacy octal escape
        return chr(int(body, 8))
    return SINGLE_ESCAPES.get(body, body)


def parse_statement(text: str, language: str = 'javascript') -> Optional[StatementNode]:
    """Parse one module statement with a fresh parser for the given language.

    A new Parser per call keeps this safe to call from any number of threads.
    """
    return LanguageParser(language).parse_statement(text)
