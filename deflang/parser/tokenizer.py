"""
Tokenizer for deflang source text.

Patterns are tried in a fixed priority order against the unconsumed text and the
first one that matches wins. Whitespace is kept in the token stream so that the
token values always concatenate back to the original source.
"""

import re
from dataclasses import dataclass
from enum import Enum, auto

from ..core.errors import TokenizationError


class TokenType(Enum):
    """Token kinds of the definition language."""

    WHITESPACE = auto()
    KW_DEF = auto()  # def
    KW_END = auto()  # end
    INTEGER = auto()
    IDENTIFIER = auto()
    OPEN_PAREN = auto()  # (
    CLOSE_PAREN = auto()  # )
    COMMA = auto()  # ,


@dataclass(frozen=True)
class Token:
    """
    A single token.

    Attributes:
        type: The token kind
        value: The exact source substring the token was matched from
        pos: Offset of the token in the source string (for error reporting)
    """

    type: TokenType
    value: str
    pos: int = 0

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, pos={self.pos})"


class Tokenizer:
    """
    Splits source text into tokens.

    Order matters: the keyword patterns sit before IDENTIFIER so that ``def`` and
    ``end`` lex as keywords. A keyword only matches when it is not immediately
    followed by another identifier character, so ``define`` is an identifier.
    """

    PATTERNS: list[tuple[TokenType, str]] = [
        (TokenType.WHITESPACE, r"\s+"),
        (TokenType.KW_DEF, r"def(?![a-zA-Z0-9])"),
        (TokenType.KW_END, r"end(?![a-zA-Z0-9])"),
        (TokenType.INTEGER, r"[0-9]+"),
        (TokenType.IDENTIFIER, r"[a-zA-Z][a-zA-Z0-9]*"),
        (TokenType.OPEN_PAREN, r"\("),
        (TokenType.CLOSE_PAREN, r"\)"),
        (TokenType.COMMA, r","),
    ]

    def __init__(self):
        self._compile_patterns()

    def _compile_patterns(self) -> None:
        """Compile regex patterns, preserving priority order."""
        self.compiled_patterns = [
            (token_type, re.compile(pattern)) for token_type, pattern in self.PATTERNS
        ]

    def tokenize(self, source: str) -> list[Token]:
        """
        Tokenize a source program.

        Args:
            source: The program text

        Returns:
            List of tokens, whitespace included

        Raises:
            TokenizationError: If no pattern matches the remaining text
        """
        tokens: list[Token] = []
        pos = 0

        while pos < len(source):
            token = self.tokenize_one_token(source, pos)
            tokens.append(token)
            pos += len(token.value)

        return tokens

    def tokenize_one_token(self, source: str, pos: int) -> Token:
        """Match a single token at ``pos``; the first pattern that matches wins."""
        for token_type, regex in self.compiled_patterns:
            match = regex.match(source, pos)
            if match:
                return Token(token_type, match.group(), pos)

        raise TokenizationError(source[pos:], pos)


def tokenize(source: str) -> list[Token]:
    """Tokenize ``source`` with a default Tokenizer."""
    return Tokenizer().tokenize(source)
