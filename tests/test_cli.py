# tests/test_cli.py
from __future__ import annotations

import json

import pytest

from numclass_api.cli import main


def test_classify_json(capsys):
    assert main(["classify", "371", "--no-fact", "--json"]) == 0
    body = json.loads(capsys.readouterr().out)
    assert body == {
        "number": 371,
        "is_prime": False,
        "is_perfect": False,
        "properties": ["armstrong", "odd"],
        "digit_sum": 11,
        "fun_fact": "371 is an interesting number.",
    }


def test_classify_report(capsys):
    assert main(["classify", "28", "--no-fact"]) == 0
    out = capsys.readouterr().out
    assert "Number 28" in out
    assert "even" in out
    assert "Perfect number" in out
    assert "1 + 2 + 4 + 7 + 14 = 28" in out


def test_classify_report_without_details(capsys):
    assert main(["classify", "28", "--no-fact", "--no-details"]) == 0
    out = capsys.readouterr().out
    assert "Perfect number" in out
    assert "1 + 2 + 4 + 7 + 14" not in out


@pytest.mark.parametrize("value", ["abc", "1.5", "-5", "9" * 5000], ids=["abc", "1.5", "-5", "5000-digits"])
def test_classify_invalid_input(capsys, value):
    assert main(["classify", value, "--no-fact"]) == 2
    assert "Invalid input" in capsys.readouterr().err


def test_list(capsys):
    assert main(["list"]) == 0
    out = capsys.readouterr().out
    for label in ("Prime number", "Perfect number", "Armstrong number"):
        assert label in out


def test_bad_config_is_user_error(tmp_path, capsys):
    bad = tmp_path / "bad.toml"
    bad.write_text("[SERVER\n", encoding="utf-8")
    assert main(["--config", str(bad), "list"]) == 2
    assert "bad.toml" in capsys.readouterr().err


def test_serve_passes_settings_to_uvicorn(monkeypatch):
    import uvicorn

    seen = {}

    def fake_run(app, **kwargs):
        seen["app"] = app
        seen.update(kwargs)

    monkeypatch.setattr(uvicorn, "run", fake_run)
    assert main(["serve", "--port", "9123", "--host", "127.0.0.1"]) == 0
    assert seen["port"] == 9123
    assert seen["host"] == "127.0.0.1"
    assert seen["app"].state.settings.port == 9123
