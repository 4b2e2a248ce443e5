# tests/test_config.py
from __future__ import annotations

from pathlib import Path

import pytest

from numclass_api.config import DEFAULT_FACT_URL, Settings, load_settings
from numclass_api.utility import UserInputError

EXAMPLE = Path(__file__).resolve().parent.parent / "settings.example.toml"


def _write(tmp_path: Path, text: str) -> Path:
    p = tmp_path / "settings.toml"
    p.write_text(text, encoding="utf-8")
    return p


def test_defaults_without_file():
    s = load_settings(env={})
    assert s == Settings()
    assert s.port == 8080
    assert s.cors_origins == ("*",)
    assert s.cors_methods == ("GET",)
    assert s.fact_url == DEFAULT_FACT_URL
    assert s.fact_timeout == 10.0
    assert s.allow_negative is False


def test_example_file_matches_defaults():
    assert load_settings(EXAMPLE, env={}) == Settings()


def test_values_from_toml(tmp_path):
    p = _write(tmp_path, """
[SERVER]
PORT = 9000
CORS_ORIGINS = ["https://a.example", "https://b.example"]
CORS_METHODS = ["get"]

[FACTS]
URL = "https://facts.example/{n}"
TIMEOUT = 2

[LOGGING]
LEVEL = "debug"
FORMAT = "json"

[BEHAVIOUR]
ALLOW_NEGATIVE = true
""")
    s = load_settings(p, env={})
    assert s.port == 9000
    assert s.cors_origins == ("https://a.example", "https://b.example")
    assert s.cors_methods == ("GET",)
    assert s.fact_url == "https://facts.example/{n}"
    assert s.fact_timeout == 2
    assert s.log_level == "DEBUG"
    assert s.log_format == "json"
    assert s.allow_negative is True
    assert s._source == p


def test_config_path_from_environment(tmp_path):
    p = _write(tmp_path, "[SERVER]\nHOST = \"127.0.0.1\"\n")
    assert load_settings(env={"NUMCLASS_API_CONFIG": str(p)}).host == "127.0.0.1"


def test_port_environment_override(tmp_path):
    p = _write(tmp_path, "[SERVER]\nPORT = 9000\n")
    assert load_settings(p, env={"PORT": "5000"}).port == 5000


def test_bad_port_environment():
    with pytest.raises(UserInputError, match="PORT"):
        load_settings(env={"PORT": "eighty"})


def test_toml_syntax_error_reports_location(tmp_path):
    p = _write(tmp_path, "[SERVER\nPORT = 1\n")
    with pytest.raises(UserInputError, match=r"settings\.toml.*line 1"):
        load_settings(p, env={})


def test_missing_file(tmp_path):
    with pytest.raises(UserInputError, match="nope.toml"):
        load_settings(tmp_path / "nope.toml", env={})


@pytest.mark.parametrize("body,needle", [
    ("[SERVER]\nPORT = \"80\"\n", "SERVER.PORT"),
    ("[SERVER]\nPORT = true\n", "SERVER.PORT"),
    ("[SERVER]\nCORS_ORIGINS = [1, 2]\n", "CORS_ORIGINS"),
    ("[SERVER]\nPORT = 70000\n", "out of range"),
    ("[FACTS]\nTIMEOUT = 0\n", "TIMEOUT"),
    ("[FACTS]\nURL = \"http://numbersapi.com/math\"\n", "placeholder"),
    ("[LOGGING]\nFORMAT = \"xml\"\n", "FORMAT"),
    ("[BEHAVIOUR]\nALLOW_NEGATIVE = \"yes\"\n", "ALLOW_NEGATIVE"),
])
def test_invalid_values(tmp_path, body, needle):
    with pytest.raises(UserInputError, match=needle):
        load_settings(_write(tmp_path, body), env={})
