"""Tests for the read cycle driver."""

import threading
from unittest.mock import Mock

import pytest

from switchboard.core import Refresher
from switchboard.exceptions import DeviceReadError


@pytest.mark.unit
class TestRefresherTick:
    """Test single read cycles."""

    def test_no_device_skips_cycle(self, framework, ain_read_binding):
        framework.put_config_binding(ain_read_binding)
        refresher = Refresher(framework)

        assert refresher.tick() is None
        assert refresher.cycles == 0

    def test_reads_bound_registers_and_updates_elements(
        self, framework, presentation, device, ain_read_binding
    ):
        framework.put_config_binding(ain_read_binding)
        framework.set_selected_devices([device])

        snapshot = Refresher(framework).tick()

        assert snapshot == {"AIN0": 0.5, "AIN1": 1.5}
        assert presentation.html["#ain-0-display"] == 0.5
        assert presentation.html["#ain-1-display"] == 1.5

    def test_fires_refresh_with_snapshot(self, framework, device, ain_read_binding, handler):
        framework.put_config_binding(ain_read_binding)
        framework.set_selected_devices([device])
        framework.on("refresh", handler)

        Refresher(framework).tick()

        handler.assert_called_once_with({"AIN0": 0.5, "AIN1": 1.5})

    def test_write_only_registers_are_not_read(self, framework, dac_write_binding):
        framework.put_config_binding(dac_write_binding)
        device = Mock()
        framework.set_selected_devices([device])

        assert Refresher(framework).tick() == {}
        device.read.assert_not_called()

    def test_shared_register_read_once(self, framework):
        device = Mock()
        device.read.return_value = {"AIN0": 2.0}
        framework.put_config_binding(
            {"class": "a", "template": "ain-0-display", "binding": "AIN0", "direction": "read"}
        )
        framework.put_config_binding(
            {"class": "a", "template": "ain-0-gauge", "binding": "AIN0", "direction": "read"}
        )
        framework.set_selected_devices([device])

        Refresher(framework).tick()

        device.read.assert_called_once_with(["AIN0"])

    def test_read_failure_fires_refresh_error(self, framework, ain_read_binding):
        errors = []
        framework.on("refresh_error", errors.append)
        device = Mock()
        device.read.side_effect = OSError("timeout")
        framework.put_config_binding(ain_read_binding)
        framework.set_selected_devices([device])
        refresher = Refresher(framework)

        assert refresher.tick() is None

        assert isinstance(errors[0], DeviceReadError)
        assert errors[0].registers == ["AIN0", "AIN1"]
        assert refresher.cycles == 0

    def test_interval_follows_refresh_rate(self, framework):
        refresher = Refresher(framework)
        framework.set_refresh_rate(250)

        assert refresher.interval == 0.25


@pytest.mark.integration
class TestRefresherThread:
    """Test the background read loop."""

    def test_start_and_stop(self, framework, device, ain_read_binding):
        framework.put_config_binding(ain_read_binding)
        framework.set_selected_devices([device])
        framework.set_refresh_rate(10)
        refreshed = threading.Event()
        framework.on("refresh", lambda snapshot: refreshed.set())
        refresher = Refresher(framework)

        refresher.start()
        try:
            assert refreshed.wait(timeout=2.0)
            assert refresher.is_running
        finally:
            refresher.stop()

        assert not refresher.is_running
        assert refresher.cycles >= 1

    def test_handler_failure_stops_loop(self, framework, device, ain_read_binding):
        framework.put_config_binding(ain_read_binding)
        framework.set_selected_devices([device])
        framework.set_refresh_rate(10)
        framework.on("refresh", Mock(side_effect=RuntimeError("broken observer")))
        refresher = Refresher(framework)

        refresher.start()
        refresher._thread.join(timeout=2.0)

        assert not refresher.is_running
        refresher.stop()
