"""
deflang parser package.

Tokenization, AST node definitions and the recursive descent parser.
"""

from .ast import ASTNode, ASTVisitor, Call, Expr, FunctionDef, IntegerLiteral, VarRef
from .parser import Parser, parse
from .tokenizer import Token, TokenType, Tokenizer, tokenize

__all__ = [
    "ASTNode",
    "ASTVisitor",
    "Call",
    "Expr",
    "FunctionDef",
    "IntegerLiteral",
    "VarRef",
    "Parser",
    "parse",
    "Token",
    "TokenType",
    "Tokenizer",
    "tokenize",
]
