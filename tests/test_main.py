import pytest

from freqchart.main import EXIT_FAILURE, EXIT_OK, EXIT_USAGE, main
from freqchart.report import BLOCK


def test_word_mode_chart(write_file, capsys):
    path = write_file("words.txt", "The cat saw the other cat. THE END\n")
    assert main(["-l", "2", path]) == EXIT_OK
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("the │")
    assert lines[0].endswith("37.50%")
    assert lines[3].startswith("cat │")
    assert lines[3].endswith("25.00%")
    assert lines[-1] == "    └" + "─" * 80


def test_character_mode_and_interleaved_options(write_file, capsys):
    path = write_file("chars.txt", "aab")
    assert main([path, "-c", "-l", "5"]) == EXIT_OK
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("a │")
    assert lines[3].startswith("b │")
    # two tokens, two rows of three lines, plus the axis
    assert len(lines) == 7


def test_last_mode_flag_wins(write_file, capsys):
    path = write_file("text.txt", "ab ab")
    assert main(["-c", "-w", "-l", "1", path]) == EXIT_OK
    assert capsys.readouterr().out.startswith("ab │")


def test_scaled_bars(write_file, capsys):
    path = write_file("text.txt", "a a b c d")
    assert main(["--scaled", "-l", "1", path]) == EXIT_OK
    first = capsys.readouterr().out.splitlines()[0]
    assert first == "a │" + BLOCK * 75 + "40.00%"


def test_length_defaults_to_ten(write_file, capsys):
    path = write_file("text.txt", " ".join(f"w{i}" for i in range(15)))
    assert main([path]) == EXIT_OK
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 10 * 3 + 1


def test_missing_file_aborts_with_failure(write_file, tmp_path, capsys):
    good = write_file("good.txt", "a")
    missing = str(tmp_path / "missing.txt")
    assert main([good, missing]) == EXIT_FAILURE
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "missing.txt" in captured.err


def test_empty_file_reports_no_data(write_file, capsys):
    path = write_file("empty.txt", "")
    assert main([path]) == EXIT_FAILURE
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "No data" in captured.err


@pytest.mark.parametrize("argv", [
    [],
    ["-l"],
    ["-l", "0", "file.txt"],
    ["-l", "-3", "file.txt"],
    ["-l", "ten", "file.txt"],
    ["--bogus", "file.txt"],
    ["--scale", "file.txt"],
])
def test_usage_errors_exit_with_status_2(argv, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == EXIT_USAGE
    assert "usage:" in capsys.readouterr().err


def test_bad_environment_setting_is_a_usage_error(monkeypatch, write_file, capsys):
    monkeypatch.setenv("FREQCHART_LENGTH", "zero")
    path = write_file("text.txt", "a")
    assert main([path]) == EXIT_USAGE
    assert "FREQCHART_LENGTH" in capsys.readouterr().err
