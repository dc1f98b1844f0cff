"""
Recursive descent parser for deflang.

Grammar:

    Def      := 'def' IDENT ArgNames Expr 'end'
    ArgNames := '(' [ IDENT (',' IDENT)* ] ')'
    Expr     := Integer | Call | VarRef
    Call     := IDENT ArgExprs
    ArgExprs := '(' [ Expr (',' Expr)* ] ')'
    VarRef   := IDENT
    Integer  := INTEGER

An identifier followed by '(' starts a Call, otherwise it is a VarRef. That is
the only place two tokens of lookahead are needed.
"""

from collections.abc import Sequence

from ..core.errors import UnexpectedEndOfInputError, UnexpectedTokenError
from .ast import Call, Expr, FunctionDef, IntegerLiteral, VarRef
from .tokenizer import Token, TokenType


class Parser:
    """
    Builds a FunctionDef from a token sequence.

    The parser reads the tokens through an explicit position and never modifies
    the buffer. Whitespace tokens are skipped at every decision point.
    """

    def __init__(self, tokens: Sequence[Token]):
        self.tokens: tuple[Token, ...] = tuple(tokens)
        self.pos = 0

    def parse(self) -> FunctionDef:
        """
        Parse the token stream into a FunctionDef.

        Raises:
            UnexpectedTokenError: If a token of the wrong kind is found
            UnexpectedEndOfInputError: If the tokens run out mid-definition
        """
        self.pos = 0
        return self.parse_def()

    def parse_def(self) -> FunctionDef:
        self.consume(TokenType.KW_DEF)
        name = self.consume(TokenType.IDENTIFIER).value
        param_names = self.parse_arg_names()
        body = self.parse_expr()
        self.consume(TokenType.KW_END)
        return FunctionDef(name, param_names, body)

    def parse_arg_names(self) -> list[str]:
        param_names: list[str] = []
        self.consume(TokenType.OPEN_PAREN)
        if self.peek(TokenType.IDENTIFIER):
            param_names.append(self.consume(TokenType.IDENTIFIER).value)
            while self.peek(TokenType.COMMA):
                self.consume(TokenType.COMMA)
                param_names.append(self.consume(TokenType.IDENTIFIER).value)
        self.consume(TokenType.CLOSE_PAREN)
        return param_names

    def parse_expr(self) -> Expr:
        """Parse an expression, choosing the production by lookahead."""
        if self.peek(TokenType.INTEGER):
            return self.parse_integer()
        if self.peek(TokenType.IDENTIFIER) and self.peek(TokenType.OPEN_PAREN, 1):
            return self.parse_call()
        return self.parse_var_ref()

    def parse_integer(self) -> IntegerLiteral:
        token = self.consume(TokenType.INTEGER)
        return IntegerLiteral(token.value)

    def parse_call(self) -> Call:
        name = self.consume(TokenType.IDENTIFIER).value
        args = self.parse_arg_exprs()
        return Call(name, args)

    def parse_arg_exprs(self) -> list[Expr]:
        args: list[Expr] = []
        self.consume(TokenType.OPEN_PAREN)
        if not self.peek(TokenType.CLOSE_PAREN):
            args.append(self.parse_expr())
            while self.peek(TokenType.COMMA):
                self.consume(TokenType.COMMA)
                args.append(self.parse_expr())
        self.consume(TokenType.CLOSE_PAREN)
        return args

    def parse_var_ref(self) -> VarRef:
        name = self.consume(TokenType.IDENTIFIER).value
        return VarRef(name)

    def _skip_whitespace(self, index: int) -> int:
        """Return the index of the first non-whitespace token at or after ``index``."""
        while index < len(self.tokens) and self.tokens[index].type == TokenType.WHITESPACE:
            index += 1
        return index

    def peek(self, token_type: TokenType, offset: int = 0) -> bool:
        """
        Check the kind of a significant token without consuming it.

        Args:
            token_type: Kind to compare against
            offset: Number of significant tokens to look past

        Returns:
            True if the token at ``offset`` has kind ``token_type``

        Raises:
            UnexpectedEndOfInputError: If fewer than ``offset + 1`` significant
                tokens remain
        """
        index = self.pos
        for _ in range(offset + 1):
            index = self._skip_whitespace(index)
            if index >= len(self.tokens):
                raise UnexpectedEndOfInputError(token_type)
            token = self.tokens[index]
            index += 1
        return token.type == token_type

    def consume(self, token_type: TokenType) -> Token:
        """
        Consume the next significant token, which must be of ``token_type``.

        Raises:
            UnexpectedTokenError: If the next token has another kind
            UnexpectedEndOfInputError: If no significant token remains
        """
        index = self._skip_whitespace(self.pos)
        if index >= len(self.tokens):
            self.pos = index
            raise UnexpectedEndOfInputError(token_type)

        token = self.tokens[index]
        if token.type != token_type:
            raise UnexpectedTokenError(token_type, token.type, token)

        self.pos = index + 1
        return token


def parse(tokens: Sequence[Token]) -> FunctionDef:
    """Parse ``tokens`` into a FunctionDef."""
    return Parser(tokens).parse()
