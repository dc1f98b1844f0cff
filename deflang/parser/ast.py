"""
Abstract Syntax Tree (AST) node definitions.

A program is a single FunctionDef whose body is an expression. Expressions are
integer literals, variable references and calls. Nodes are frozen pydantic
models: they validate their fields on construction, compare structurally and
cannot be modified afterwards.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Annotated, Any, Protocol, Union

from pydantic import BaseModel, ConfigDict, StringConstraints

Identifier = Annotated[str, StringConstraints(pattern=r"^[a-zA-Z][a-zA-Z0-9]*$")]
Digits = Annotated[str, StringConstraints(pattern=r"^(0|[1-9][0-9]*)$")]


class ASTVisitor(Protocol):
    """
    Visitor protocol for traversing AST nodes.

    Code generators implement one method per node kind.
    """

    def visit_integer_literal(self, node: IntegerLiteral) -> Any:
        ...

    def visit_function_def(self, node: FunctionDef) -> Any:
        ...

    def visit_call(self, node: Call) -> Any:
        ...

    def visit_var_ref(self, node: VarRef) -> Any:
        ...


class ASTNode(BaseModel):
    """Base class for all AST nodes."""

    model_config = ConfigDict(frozen=True)

    @abstractmethod
    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor for traversal."""


# Leaf Nodes


class IntegerLiteral(ASTNode):
    """
    Represents an integer literal.

    Examples: 0, 42, 007 (value "7")

    The value is kept as decimal text without leading zeros, so literals of
    any length survive unchanged.
    """

    value: Digits

    def __init__(self, value: int | str, **kwargs):
        if isinstance(value, str):
            value = value.lstrip("0") or "0"
        elif isinstance(value, int) and not isinstance(value, bool):
            value = str(value)
        super().__init__(value=value, **kwargs)

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_integer_literal(self)

    def __repr__(self) -> str:
        return f"IntegerLiteral({self.value})"


class VarRef(ASTNode):
    """Reference to a parameter by name."""

    name: Identifier

    def __init__(self, name: str, **kwargs):
        super().__init__(name=name, **kwargs)

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_var_ref(self)

    def __repr__(self) -> str:
        return f"VarRef({self.name!r})"


# Composite Nodes


class Call(ASTNode):
    """
    Represents a function call.

    Examples: f(), add(x, 1), g(h(x), y)

    The number of arguments is not checked against any declaration.
    """

    name: Identifier
    args: tuple[Expr, ...] = ()

    def __init__(self, name: str, args: Any = (), **kwargs):
        super().__init__(name=name, args=args, **kwargs)

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_call(self)

    def __repr__(self) -> str:
        args_repr = ", ".join(repr(arg) for arg in self.args)
        return f"Call({self.name!r}, [{args_repr}])"


class FunctionDef(ASTNode):
    """
    The root of every parse: ``def name(params) body end``.

    Duplicate parameter names are kept as written.
    """

    name: Identifier
    param_names: tuple[Identifier, ...]
    body: Expr

    def __init__(self, name: str, param_names: Any, body: Any, **kwargs):
        super().__init__(name=name, param_names=param_names, body=body, **kwargs)

    def accept(self, visitor: ASTVisitor) -> Any:
        return visitor.visit_function_def(self)

    def __repr__(self) -> str:
        params_repr = ", ".join(repr(name) for name in self.param_names)
        return f"FunctionDef({self.name!r}, [{params_repr}], {self.body!r})"


Expr = Union[IntegerLiteral, Call, VarRef]

Call.model_rebuild()
FunctionDef.model_rebuild()
