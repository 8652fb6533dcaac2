import io

import pytest

from qlogger.cli import choose_target, choose_template, main
from qlogger.logger import DEFAULT_TEMPLATE, OutputTarget


@pytest.mark.parametrize(
    "choice, expected",
    [
        (1, OutputTarget.CONSOLE),
        (2, OutputTarget.FILE),
        (3, OutputTarget.BOTH),
        (4, OutputTarget.CONSOLE),
    ],
)
def test_choose_target(choice, expected):
    assert choose_target(choice) is expected


@pytest.mark.parametrize("choice", [0, 5, -1])
def test_choose_target_invalid(choice):
    assert choose_target(choice) is None


@pytest.mark.parametrize(
    "choice, expected",
    [
        (1, "{t} | {L} | {f}:{l} -> {m}"),
        (2, "[{L}] {m}"),
        (3, "{t} - {m}"),
        (4, "{m} ({f}:{l})"),
        (9, DEFAULT_TEMPLATE),
    ],
)
def test_choose_template(choice, expected):
    assert choose_template(choice) == expected


def test_main_file_target_from_stdin(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n"))
    assert main([]) == 0
    suffixed = list(tmp_path.glob("app_log_*.log"))
    assert len(suffixed) == 1
    first = suffixed[0].read_text(encoding="utf-8")
    assert "TRACE" in first and "Critical message: system error!" in first
    fixed = (tmp_path / "fixed_name_log.log").read_text(encoding="utf-8")
    assert fixed.startswith("\ufeff")
    assert "User error Alice with code -404" in fixed
    assert "3.14, string primer" in fixed
    out = capsys.readouterr().out
    assert "[Console]" not in out
    assert out.rstrip().endswith("Завершение программы.")


def test_main_custom_template(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["--target", "4", "--template", "2"]) == 0
    out = capsys.readouterr().out
    assert "[Console] [INFO] Info message: user login" in out
    assert "[Console] [ERROR] Error message: error - cant open file config.txt" in out


def test_main_invalid_choice_falls_back_to_console(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Неверный выбор. Используется вывод в консоль." in out
    assert "Debug message posle smeni loga" in out
    assert "[File]" not in out