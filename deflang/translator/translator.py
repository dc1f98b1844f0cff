"""
deflang translator - coordinate the translation pipeline.

Orchestrates:
1. Tokenize the source text
2. Parse the tokens into a FunctionDef
3. Generate the JavaScript function
4. Assemble it with the runtime preamble and the test trailer
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..codegen import JavaScriptGenerator
from ..core.config import Settings, get_settings
from ..core.logging import get_context_logger, get_logger
from ..parser import FunctionDef, Parser, Token, Tokenizer

logger = get_logger(__name__)


@dataclass
class TranslationResult:
    """Everything produced by one run of the pipeline."""

    tokens: list[Token]
    """Tokens in source order, whitespace included"""

    tree: FunctionDef
    """Parsed definition"""

    generated: str
    """The generated function on its own"""

    program: str
    """Generated function wrapped in the preamble and trailer"""


def assemble_program(generated: str, preamble: str = "", trailer: str = "") -> str:
    """Join the preamble, generated code and trailer, skipping empty parts."""
    return "\n".join(part for part in (preamble, generated, trailer) if part)


class Translator:
    """
    Run source text through the tokenizer, parser and generator.

    Any DeflangError raised by a stage propagates unchanged; no partial
    result is returned.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.tokenizer = Tokenizer()
        self.generator = JavaScriptGenerator()

    def translate(self, source: str) -> TranslationResult:
        tokens = self.tokenizer.tokenize(source)
        logger.debug(f"Tokenized {len(source)} characters into {len(tokens)} tokens")

        tree = Parser(tokens).parse()
        logger.debug(f"Parsed function '{tree.name}' with {len(tree.param_names)} parameter(s)")

        generated = self.generator.generate(tree)
        return TranslationResult(
            tokens=tokens,
            tree=tree,
            generated=generated,
            program=self.assemble(generated),
        )

    def assemble(self, generated: str) -> str:
        return assemble_program(
            generated,
            preamble=self.settings.RUNTIME_PREAMBLE,
            trailer=self.settings.TEST_TRAILER,
        )


def translate_source(source: str) -> str:
    """Translate ``source`` to the bare JavaScript function text."""
    return Translator().translate(source).generated


def convert_src_file(
    source_path: str | Path,
    output_path: str | Path | None = None,
    *,
    overwrite: bool = False,
    encoding: str | None = None,
    standalone: bool = True,
    settings: Settings | None = None,
) -> tuple[Path, TranslationResult]:
    """
    Translate a .src file and write the result.

    Args:
        source_path: The program to translate
        output_path: Destination (defaults to the source with OUTPUT_SUFFIX)
        overwrite: Allow replacing an existing output file
        encoding: Encoding for reading and writing (defaults to ENCODING)
        standalone: Write the preamble and trailer around the function
        settings: Settings to use instead of the cached ones

    Returns:
        The written path and the translation result
    """
    settings = settings or get_settings()
    encoding = encoding or settings.ENCODING

    src_path = Path(source_path)
    if not src_path.exists():
        raise FileNotFoundError(f"Source file not found: {src_path}")

    log = get_context_logger(__name__, source=str(src_path))

    output = Path(output_path) if output_path else src_path.with_suffix(settings.OUTPUT_SUFFIX)
    if output.exists() and not overwrite:
        raise FileExistsError(f"Refusing to overwrite existing file: {output}")

    result = Translator(settings).translate(src_path.read_text(encoding=encoding))

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(result.program if standalone else result.generated, encoding=encoding)
    log.info("Translated source", extra_data={"output": str(output), "function": result.tree.name})
    return output, result
