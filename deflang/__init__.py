"""
deflang - translate single-function definitions into JavaScript.

    >>> from deflang import translate_source
    >>> translate_source("def f(x) g(h(x), 1) end")
    'function f(x) { return g(h(x), 1) }'
"""

from .codegen import JavaScriptGenerator, generate
from .core.errors import (
    DeflangError,
    TokenizationError,
    UnexpectedEndOfInputError,
    UnexpectedTokenError,
    UnsupportedNodeError,
)
from .parser import Call, FunctionDef, IntegerLiteral, Parser, Tokenizer, VarRef
from .translator import Translator, translate_source

__version__ = "0.1.0"

__all__ = [
    "JavaScriptGenerator",
    "generate",
    "DeflangError",
    "TokenizationError",
    "UnexpectedEndOfInputError",
    "UnexpectedTokenError",
    "UnsupportedNodeError",
    "Call",
    "FunctionDef",
    "IntegerLiteral",
    "Parser",
    "Tokenizer",
    "VarRef",
    "Translator",
    "translate_source",
]
