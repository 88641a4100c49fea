"""Shared fixtures."""

import pytest

SCENARIO_YAML = """\
system:
  arming_status: DISARMED
  alarm_status: NO_ALARM
sensors:
  - name: Front Door
    type: DOOR
  - name: Hall
    type: motion
events:
  - arm: ARMED_AWAY
  - sensor: Front Door
    active: true
  - sensor: Hall
    active: true
  - image: false
  - arm: DISARMED
"""


@pytest.fixture
def scenario_file(tmp_path):
    path = tmp_path / "scenario.yaml"
    path.write_text(SCENARIO_YAML)
    return path
