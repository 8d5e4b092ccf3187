"""Pytest fixtures for tests."""

import json
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import Mock

import pytest

from switchboard.core import Framework
from switchboard.devices import SimulatedDevice
from switchboard.models import FrameworkConfig
from switchboard.presentation import InMemoryPresentation


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def presentation():
    """Headless presentation sink."""
    return InMemoryPresentation()


@pytest.fixture
def device():
    """Simulated device with a few analog inputs seeded."""
    return SimulatedDevice(registers={"AIN0": 0.5, "AIN1": 1.5, "DAC0": 0.0})


@pytest.fixture
def framework(presentation, temp_dir):
    """Framework wired to the headless sink, with load errors collected on `framework.load_errors`."""
    fw = Framework(config=FrameworkConfig(modules_dir=temp_dir), presentation=presentation)
    fw.load_errors = []
    fw.on("load_error", fw.load_errors.append)
    return fw


@pytest.fixture
def handler():
    """A mock event handler."""
    return Mock()


@pytest.fixture
def ain_read_binding():
    return {
        "class": "analog-input",
        "template": "ain-#(0:1)-display",
        "binding": "AIN#(0:1)",
        "direction": "read",
    }


@pytest.fixture
def dac_write_binding():
    return {
        "class": "dac",
        "template": "dac-0-input",
        "binding": "DAC0",
        "direction": "write",
        "event": "change",
    }


@pytest.fixture
def module_dir(temp_dir):
    """An installed module with a template, a JSON file and bindings."""
    path = temp_dir / "analog_inputs"
    path.mkdir()
    (path / "module.json").write_text(json.dumps({
        "name": "analog_inputs",
        "template": "view.html",
        "json_files": ["ranges.json"],
        "bindings": [
            {
                "class": "analog-input",
                "template": "ain-#(0:1)-display",
                "binding": "AIN#(0:1)",
                "direction": "read",
            },
            {
                "class": "dac",
                "template": "dac-0-input",
                "binding": "DAC0",
                "direction": "hybrid",
                "event": "change",
            },
        ],
        "config_controls": [{"selector": "#apply", "event": "click"}],
    }))
    (path / "view.html").write_text(
        "{% for r in json['analog_inputs/ranges'] %}<span id=\"ain-{{ loop.index0 }}-display\">"
        "{{ r }}</span>{% endfor %}"
    )
    (path / "ranges.json").write_text(json.dumps(["10V", "1V"]))
    return path
