"""
Translation exceptions.

Every stage of the pipeline raises a subclass of DeflangError. Errors are
terminal: nothing is generated or written once one is raised.
"""

from typing import Any, Dict, Optional


class DeflangError(Exception):
    """Base exception for deflang errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class TokenizationError(DeflangError):
    """Raised when no token pattern matches the remaining source"""

    def __init__(self, remaining: str, pos: int = 0):
        self.remaining = remaining
        self.pos = pos
        super().__init__(
            message=f'tokenization error at position {pos}, remaining program: "{remaining}"',
            details={"remaining": remaining, "pos": pos}
        )


class UnexpectedTokenError(DeflangError):
    """Raised when the parser finds a token of the wrong kind"""

    def __init__(self, expected: Any, actual: Any, token: Any = None):
        self.expected = expected
        self.actual = actual
        self.token = token
        message = f"Expected token type {expected.name} but got {actual.name}"
        details: Dict[str, Any] = {"expected": expected.name, "actual": actual.name}
        if token is not None:
            message += f" ('{token.value}' at position {token.pos})"
            details["value"] = token.value
            details["pos"] = token.pos
        super().__init__(message=message, details=details)


class UnexpectedEndOfInputError(DeflangError):
    """Raised when the token stream runs out mid-parse"""

    def __init__(self, expected: Any = None):
        self.expected = expected
        if expected is None:
            message = "Unexpected end of input"
        else:
            message = f"Unexpected end of input, expected token type {expected.name}"
        super().__init__(
            message=message,
            details={"expected": expected.name if expected is not None else None}
        )


class UnsupportedNodeError(DeflangError):
    """Raised when the generator receives something outside the AST node set"""

    def __init__(self, node_type: str):
        self.node_type = node_type
        super().__init__(
            message=f"Unexpected node type: {node_type}",
            details={"node_type": node_type}
        )

