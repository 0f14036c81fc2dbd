import json
import logging

import pytest

from turing_engine.cli import main


def test_json_output(capsys):
    assert main(["busy-beaver-2", "--json", "--no-trace"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload == {
        "machine": "busy-beaver-2",
        "state": "H",
        "head": 0,
        "steps": 3,
        "tape": ["0", "1", "1"],
    }


def test_text_output_uses_configured_radius(tmp_path, capsys):
    config = tmp_path / "settings.yaml"
    config.write_text("trace_enabled: false\ntape_radius: 1\n", encoding="utf-8")
    assert main(["busy-beaver-3", "--config", str(config)]) == 0
    out = capsys.readouterr().out
    assert "Estado final: H" in out
    assert "Pasos ejecutados: 13" in out
    assert "Cinta: 1[1]1" in out


def test_unknown_machine_is_rejected(capsys):
    with pytest.raises(SystemExit):
        main(["busy-beaver-9"])


@pytest.mark.parametrize(
    "argv, level",
    [
        (["busy-beaver-2", "--no-trace"], logging.WARNING),
        (["busy-beaver-2"], logging.DEBUG),
    ],
)
def test_logging_level_follows_trace(monkeypatch, capsys, argv, level):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    assert main(argv) == 0
    assert calls[0]["level"] == level


def test_disabled_trace_in_config_keeps_cli_quiet(tmp_path, monkeypatch, capsys):
    config = tmp_path / "settings.yaml"
    config.write_text("trace_enabled: false\n", encoding="utf-8")
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    assert main(["busy-beaver-2", "--config", str(config)]) == 0
    assert calls[0]["level"] == logging.WARNING
