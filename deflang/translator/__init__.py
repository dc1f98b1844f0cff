"""
deflang translator - turn .src programs into JavaScript.

Wraps the tokenizer, parser and generator, and handles file input/output.
"""

from .translator import (
    TranslationResult,
    Translator,
    assemble_program,
    convert_src_file,
    translate_source,
)

__all__ = [
    "TranslationResult",
    "Translator",
    "assemble_program",
    "convert_src_file",
    "translate_source",
]
