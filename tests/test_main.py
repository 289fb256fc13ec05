import io
from typing import Generator

import pytest

from examsys.core.config import AnswerPolicy, Settings, get_settings
from examsys.core.console import Console
from examsys.core.errors import InputClosedError, InputParseError
from examsys.main import main


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch) -> Generator[None, None, None]:
    monkeypatch.delenv("EXAMSYS_INVALID_ANSWER_POLICY", raising=False)
    monkeypatch.delenv("EXAMSYS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    get_settings.cache_clear()  # type: ignore[attr-defined]
    yield
    get_settings.cache_clear()  # type: ignore[attr-defined]


def _stdin(monkeypatch, *lines):
    monkeypatch.setattr("sys.stdin", io.StringIO("".join(f"{line}\n" for line in lines)))


def test_main_runs_a_full_session(monkeypatch, capsys):
    _stdin(monkeypatch, "1", "Math", "1", "60", "1", "1", "Q1", "Is 2+2=4?", "5", "1", "1")
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Correct!" in out
    assert out.rstrip().endswith("Your total score: 5")


def test_main_invalid_exam_type_exits_non_zero(monkeypatch, capsys):
    _stdin(monkeypatch, "1", "Math", "7", "60", "1")
    assert main([]) == 1
    assert "Error: Invalid exam type" in capsys.readouterr().err


def test_main_answer_policy_flag(monkeypatch, capsys):
    _stdin(monkeypatch, "1", "Math", "2", "60", "1", "1", "Q1", "Is 2+2=4?", "5", "1", "maybe")
    assert main(["--answer-policy", "abort"]) == 1
    assert "Error:" in capsys.readouterr().err


def test_console_reads_and_parses_lines():
    stdout = io.StringIO()
    console = Console(stdin=io.StringIO("42\nhello\r\nx\n"), stdout=stdout)
    assert console.read_int("Number: ") == 42
    assert console.read("Word: ") == "hello"
    with pytest.raises(InputParseError):
        console.read_int("Number: ")
    with pytest.raises(InputClosedError):
        console.read("More: ")
    console.write("done")
    assert stdout.getvalue() == "Number: Word: Number: More: done\n"


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("EXAMSYS_INVALID_ANSWER_POLICY", "abort")
    monkeypatch.setenv("EXAMSYS_LOG_LEVEL", "debug")
    settings = Settings()
    assert settings.invalid_answer_policy == AnswerPolicy.abort
    assert settings.log_level == "DEBUG"


def test_settings_reject_unknown_log_level(monkeypatch):
    monkeypatch.setenv("EXAMSYS_LOG_LEVEL", "chatty")
    with pytest.raises(ValueError):
        Settings()
