"""
JavaScript code generation.

The generator is a visitor over the closed AST node set:

- FunctionDef('f', ['x'], VarRef('x')) → "function f(x) { return x }"
- Call('g', [VarRef('x'), IntegerLiteral(1)]) → "g(x, 1)"
"""

from typing import Any

from ..core.errors import UnsupportedNodeError
from ..parser.ast import Call, FunctionDef, IntegerLiteral, VarRef

NODE_TYPES = (FunctionDef, Call, VarRef, IntegerLiteral)


class JavaScriptGenerator:
    """Render an AST as JavaScript source text."""

    def generate(self, node: Any) -> str:
        """
        Render ``node`` and everything below it.

        Raises:
            UnsupportedNodeError: If ``node`` is not one of the AST node kinds
        """
        if not isinstance(node, NODE_TYPES):
            raise UnsupportedNodeError(type(node).__name__)
        return node.accept(self)

    def visit_function_def(self, node: FunctionDef) -> str:
        params_str = ", ".join(node.param_names)
        return f"function {node.name}({params_str}) {{ return {self.generate(node.body)} }}"

    def visit_call(self, node: Call) -> str:
        args_str = ", ".join(self.generate(arg) for arg in node.args)
        return f"{node.name}({args_str})"

    def visit_var_ref(self, node: VarRef) -> str:
        return node.name

    def visit_integer_literal(self, node: IntegerLiteral) -> str:
        return node.value


def generate(node: Any) -> str:
    """Render ``node`` with a default JavaScriptGenerator."""
    return JavaScriptGenerator().generate(node)
