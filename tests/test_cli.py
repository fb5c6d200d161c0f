import logging

import pytest

from souplang.cli import main


@pytest.fixture(autouse=True)
def _restore_logging():
    logger = logging.getLogger("souplang")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_no_input_file(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "No input file given"


def test_valid_program_writes_outputs(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    source = tmp_path / "prog.soup"
    source.write_text("let x = 1\n", encoding="utf-8")
    assert main([str(source)]) == 0
    output = (tmp_path / "output.txt").read_text(encoding="utf-8")
    assert "LetDeclaration" in output
    assert "'x'" in output
    assert (tmp_path / "errors.txt").read_text(encoding="utf-8") == "[]"
    assert capsys.readouterr().out == ""


def test_invalid_program_reports_errors(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    source = tmp_path / "prog.soup"
    source.write_text('doc "a" b\n', encoding="utf-8")
    assert main([str(source)]) == 0
    out = capsys.readouterr().out
    assert "Expected [end of statement] but got b" in out
    errors = (tmp_path / "errors.txt").read_text(encoding="utf-8")
    assert "[end of statement]" in errors


def test_missing_file_exits(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit):
        main([str(tmp_path / "missing.soup")])
    assert not (tmp_path / "output.txt").exists()