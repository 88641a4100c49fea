"""Tests for the command-line interface."""

import json

from click.testing import CliRunner

from catpoint import __version__
from catpoint.cli import cli


def invoke(*args):
    return CliRunner().invoke(cli, list(args), obj={})


def test_version():
    result = invoke("--version")
    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_status_json(scenario_file):
    result = invoke("-c", str(scenario_file), "status", "--json")
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["ok"] is True
    assert payload["arming_status"] == "DISARMED"
    assert [s["name"] for s in payload["sensors"]] == ["Front Door", "Hall"]
    assert payload["events"] == 5


def test_status_table(scenario_file):
    result = invoke("-c", str(scenario_file), "status")
    assert result.exit_code == 0
    assert "Front Door" in result.stdout
    assert "Disarmed" in result.stdout


def test_simulate_json(scenario_file):
    result = invoke("-c", str(scenario_file), "simulate", "--json")
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["ok"] is True
    assert payload["alarm_status"] == "NO_ALARM"
    assert {"kind": "alarm", "value": "ALARM"} in payload["notifications"]


def test_simulate_text(scenario_file):
    result = invoke("-c", str(scenario_file), "simulate")
    assert result.exit_code == 0
    assert "Awooga!" in result.stdout
    assert "No cats here" in result.stdout


def test_missing_config_json(tmp_path):
    result = invoke("-c", str(tmp_path / "missing.yaml"), "simulate", "--json")
    assert result.exit_code == 1
    payload = json.loads(result.stdout)
    assert payload["ok"] is False
    assert "not found" in payload["error"]
