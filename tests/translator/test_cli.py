"""Tests for the deflang command line interface."""

import json

import pytest

from deflang.core.config import get_settings
from deflang.translator.cli import main


@pytest.fixture(autouse=True)
def default_scaffolding(monkeypatch):
    """Keep the environment from changing settings under test."""
    for name in ("RUNTIME_PREAMBLE", "TEST_TRAILER", "OUTPUT_SUFFIX", "ENCODING", "LOG_FILE"):
        monkeypatch.delenv(f"DEFLANG_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestCliTranslate:
    """Test the default program output mode."""

    def test_success(self, src_file, capsys):
        assert main([str(src_file)]) == 0

        output = src_file.with_suffix(".js")
        assert output.exists()
        assert "function f(x, y) { return add(x, y) }" in output.read_text(encoding="utf-8")
        assert f"Wrote {output}" in capsys.readouterr().out

    def test_quiet(self, src_file, capsys):
        assert main([str(src_file), "-q"]) == 0
        assert capsys.readouterr().out == ""

    def test_fragment_only(self, src_file, tmp_path):
        target = tmp_path / "fragment.js"
        assert main([str(src_file), str(target), "--fragment-only", "-q"]) == 0
        assert target.read_text(encoding="utf-8") == "function f(x, y) { return add(x, y) }"

    def test_overwrite_flag(self, src_file):
        src_file.with_suffix(".js").write_text("old", encoding="utf-8")
        assert main([str(src_file), "-q"]) == 1
        assert main([str(src_file), "-q", "--overwrite"]) == 0


class TestCliErrors:
    """Test failures are reported on stderr with exit status 1."""

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "nope.src")]) == 1
        assert "Error: Source file not found" in capsys.readouterr().err

    def test_tokenization_error(self, bad_src_file, capsys):
        assert main([str(bad_src_file)]) == 1

        err = capsys.readouterr().err
        assert "Error: tokenization error" in err
        assert "# end" in err
        assert not bad_src_file.with_suffix(".js").exists()

    def test_parse_error(self, tmp_path, capsys):
        source = tmp_path / "short.src"
        source.write_text("def f(x", encoding="utf-8")
        assert main([str(source)]) == 1
        assert "Error: Unexpected end of input" in capsys.readouterr().err

    def test_undecodable_source(self, tmp_path, capsys):
        """Test bytes that are not valid in the source encoding."""
        source = tmp_path / "latin.src"
        source.write_bytes(b"def f(x) \xff end")

        assert main([str(source)]) == 1
        assert capsys.readouterr().err.startswith("Error: ")
        assert not source.with_suffix(".js").exists()

    def test_undecodable_source_dump(self, tmp_path, capsys):
        source = tmp_path / "latin.src"
        source.write_bytes(b"def f(x) \xff end")

        assert main([str(source), "--emit", "tokens"]) == 1
        assert "Error: " in capsys.readouterr().err

    def test_unknown_encoding(self, src_file, capsys):
        """Test an encoding name Python does not know."""
        assert main([str(src_file), "--encoding", "no-such-codec"]) == 1
        assert "Error: " in capsys.readouterr().err
        assert not src_file.with_suffix(".js").exists()


class TestCliDump:
    """Test the token and AST dump modes."""

    def test_emit_tokens(self, src_file, capsys):
        assert main([str(src_file), "--emit", "tokens"]) == 0

        out = capsys.readouterr().out
        assert out.splitlines()[0] == "Token(KW_DEF, 'def', pos=0)"
        assert not src_file.with_suffix(".js").exists()

    def test_emit_ast(self, src_file, capsys):
        assert main([str(src_file), "--emit", "ast"]) == 0

        tree = json.loads(capsys.readouterr().out)
        assert tree["name"] == "f"
        assert tree["param_names"] == ["x", "y"]
        assert tree["body"]["name"] == "add"

    def test_emit_missing_file(self, tmp_path):
        assert main([str(tmp_path / "nope.src"), "--emit", "ast"]) == 1

    def test_dump_uses_loaded_settings(self, src_file, monkeypatch):
        """Test dump mode translates with the same settings as program mode."""
        from deflang.translator import cli

        seen = []

        class RecordingTranslator(cli.Translator):
            def __init__(self, settings=None):
                seen.append(settings)
                super().__init__(settings)

        monkeypatch.setattr(cli, "Translator", RecordingTranslator)

        assert main([str(src_file), "--emit", "ast"]) == 0
        assert len(seen) == 1
        assert seen[0] is get_settings()
