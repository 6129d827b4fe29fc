import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ["FREQCHART_LENGTH", "FREQCHART_BAR_WIDTH", "FREQCHART_AXIS_WIDTH",
                 "FREQCHART_ENCODING", "FREQCHART_LOG_LEVEL"]:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("FREQCHART_SHOW_PROGRESS", "false")


@pytest.fixture
def write_file(tmp_path):
    def _write(name, content):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write
