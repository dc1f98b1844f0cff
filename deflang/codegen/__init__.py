"""Code generation from deflang ASTs."""

from .generator import JavaScriptGenerator, generate

__all__ = ["JavaScriptGenerator", "generate"]
