import os

import pytest

from freqchart.config import load_settings
from freqchart.exceptions import ConfigurationError


def test_defaults(tmp_path):
    settings = load_settings(str(tmp_path / "absent.env"))
    assert settings.length == 10
    assert settings.bar_width == 75
    assert settings.axis_width == 80
    assert settings.encoding == "utf-8"
    assert settings.show_progress is False
    assert settings.log_level == "WARNING"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("FREQCHART_LENGTH", "3")
    monkeypatch.setenv("FREQCHART_LOG_LEVEL", "debug")
    settings = load_settings(str(tmp_path / "absent.env"))
    assert settings.length == 3
    assert settings.log_level == "DEBUG"


def test_dotenv_file_is_read(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("FREQCHART_BAR_WIDTH=40\n", encoding="utf-8")
    try:
        assert load_settings(str(env_file)).bar_width == 40
    finally:
        os.environ.pop("FREQCHART_BAR_WIDTH", None)


@pytest.mark.parametrize("name,value", [
    ("FREQCHART_LENGTH", "0"),
    ("FREQCHART_LENGTH", "ten"),
    ("FREQCHART_AXIS_WIDTH", "-4"),
    ("FREQCHART_ENCODING", "no-such-codec"),
    ("FREQCHART_LOG_LEVEL", "LOUD"),
])
def test_invalid_values_raise(monkeypatch, tmp_path, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigurationError):
        load_settings(str(tmp_path / "absent.env"))
