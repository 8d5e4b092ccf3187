"""Tests for rendering module views and loading/unloading modules."""

from unittest.mock import Mock

import pytest

from switchboard.exceptions import ResourceInvalidError, ResourceNotFoundError, TemplateRenderError
from switchboard.resources import ModuleResources


@pytest.mark.unit
class TestSetDeviceView:
    """Test view rendering into the presentation sink."""

    def test_renders_template_with_json_context(self, framework, presentation, module_dir, handler):
        framework.on("load_template", handler)

        html = framework.set_device_view(
            "analog_inputs/view.html", ["analog_inputs/ranges.json"]
        )

        assert '<span id="ain-0-display">10V</span>' in html
        assert '<span id="ain-1-display">1V</span>' in html
        assert presentation.html["#device-view"] == html
        handler.assert_called_once_with(html)

    def test_extra_context_is_available(self, framework, temp_dir):
        (temp_dir / "mod").mkdir()
        (temp_dir / "mod" / "view.html").write_text("Device {{ device_name }}")

        html = framework.set_device_view("mod/view.html", context={"device_name": "T7"})

        assert html == "Device T7"

    def test_missing_template_fires_load_error(self, framework, presentation):
        assert framework.set_device_view("missing/view.html") is None

        assert isinstance(framework.load_errors[0], ResourceNotFoundError)
        assert presentation.html == {}

    def test_missing_json_file_fires_load_error(self, framework, module_dir):
        framework.set_device_view("analog_inputs/view.html", ["analog_inputs/nope.json"])

        assert framework.load_errors[0].kind == "JSON"

    def test_render_failure_fires_load_error(self, framework, temp_dir):
        (temp_dir / "mod").mkdir()
        (temp_dir / "mod" / "view.html").write_text("{% for x in %}")

        assert framework.set_device_view("mod/view.html") is None

        assert isinstance(framework.load_errors[0], TemplateRenderError)

    def test_undecodable_template_fires_load_error(self, framework, presentation, temp_dir):
        (temp_dir / "mod").mkdir()
        (temp_dir / "mod" / "view.html").write_bytes(b"\xff\xfe not utf-8")

        assert framework.set_device_view("mod/view.html") is None

        assert isinstance(framework.load_errors[0], ResourceInvalidError)
        assert presentation.html == {}

    def test_template_runtime_error_fires_load_error(self, framework, temp_dir):
        (temp_dir / "mod").mkdir()
        (temp_dir / "mod" / "view.html").write_text("{{ 1 + 'a' }}")

        assert framework.set_device_view("mod/view.html") is None

        assert isinstance(framework.load_errors[0], TemplateRenderError)
        assert "TypeError" in framework.load_errors[0].render_error


@pytest.mark.integration
class TestModuleLoading:
    """Test loading a module from its descriptor."""

    @pytest.fixture
    def info(self, module_dir):
        return ModuleResources(module_dir.parent).get_module_info("analog_inputs")

    def test_load_module_sets_everything_up(self, framework, presentation, info, handler):
        framework.on("module_load", handler)

        framework.load_module(info)

        assert framework.load_errors == []
        assert framework.module is info
        assert framework.num_bindings() == 3
        assert "ain-1-display" in presentation.html["#device-view"]
        assert presentation.listener_count("#dac-0-input") == 1
        assert presentation.listener_count("#apply") == 1
        handler.assert_called_once_with(info)

    def test_load_module_applies_refresh_rate(self, framework, info):
        framework.load_module(info.model_copy(update={"refresh_rate": 200}))

        assert framework.refresh_rate == 200

    def test_bad_binding_is_reported_and_others_load(self, framework, info):
        bindings = info.bindings + [{"class": "x", "template": "t", "binding": "b"}]

        framework.load_module(info.model_copy(update={"bindings": bindings}))

        assert framework.num_bindings() == 3
        assert len(framework.load_errors) == 1
        assert framework.load_errors[0].field == "direction"

    def test_undecodable_view_does_not_stop_bindings(self, framework, info, module_dir):
        (module_dir / "view.html").write_bytes(b"\xff\xfe")

        framework.load_module(info)

        assert isinstance(framework.load_errors[0], ResourceInvalidError)
        assert framework.num_bindings() == 3
        assert framework.module is info

    def test_module_without_template_renders_nothing(self, framework, presentation, info):
        framework.load_module(info.model_copy(update={"template": None}))

        assert "#device-view" not in presentation.html

    def test_unload_module_detaches_and_clears(self, framework, presentation, info):
        unloaded = Mock()
        framework.on("unload_module", unloaded)
        framework.load_module(info)

        framework.unload_module()

        assert framework.num_bindings() == 0
        assert framework.config_controls == []
        assert framework.module is None
        assert presentation.listener_count() == 0
        unloaded.assert_called_once_with(info)

    def test_reload_after_unload(self, framework, presentation, info):
        framework.load_module(info)
        framework.unload_module()
        framework.load_module(info)

        assert framework.num_bindings() == 3
        assert presentation.listener_count() == 2
