"""Binding lifecycle manager: the framework a hardware module is built on."""

import logging
from collections.abc import Iterable, Mapping, Sequence
from threading import RLock
from typing import Any

from pydantic import ValidationError

from switchboard.exceptions import (
    BindingFieldMissingError,
    ConfigurationError,
    ConfigValidationError,
    DeviceWriteError,
    InvalidDirectionError,
    NoDeviceSelectedError,
    ResourceError,
    SwitchboardError,
    UnknownBindingError,
    describe_validation_error,
)
from switchboard.models import BindingRecord, ConfigControl, Direction, FrameworkConfig, ModuleInfo
from switchboard.presentation import InMemoryPresentation
from switchboard.protocols import (
    Device,
    FrameworkEvent,
    PresentationSink,
    ResourceLoader,
    TemplateRenderer,
)
from switchboard.ranges import expand_name, expand_pair
from switchboard.resources import JinjaTemplateRenderer, ModuleResources

from .bindings import BindingTable
from .dispatcher import EventDispatcher, EventHandler

logger = logging.getLogger(__name__)

REQUIRED_BINDING_FIELDS = ("class", "template", "binding", "direction")


class Framework:
    """
    Keeps a module's UI elements and device registers in sync.

    A module declares bindings between element identifiers (templates) and
    register names. Read bindings are updated from every read snapshot
    passed to `on_read`; write bindings get a listener on the presentation
    sink that writes the element's value to the selected device when the
    declared UI event occurs. Hybrid bindings do both.

    Configuration mistakes never raise out of the public operations: they
    are fired on `load_error` and only the offending binding is skipped.

    Example:
        ```python
        framework = Framework(presentation=sink)
        framework.on("load_error", lambda error: print(error.user_message))
        framework.put_config_binding({
            "class": "analog-input",
            "template": "ain-#(0:1)-display",
            "binding": "AIN#(0:1)",
            "direction": "read",
        })
        framework.on_read({"AIN0": 1.23})
        ```

    Threading:
        The engine is single-threaded. Public operations hold `lock` (an
        RLock, so handlers may call back into the framework) which lets a
        background `Refresher` deliver read snapshots safely.
    """

    def __init__(
        self,
        config: FrameworkConfig | None = None,
        presentation: PresentationSink | None = None,
        resources: ResourceLoader | None = None,
        renderer: TemplateRenderer | None = None,
    ):
        """
        Initialize the framework.

        Args:
            config: Framework settings (refresh rate, modules directory, view selector)
            presentation: UI sink; defaults to a headless in-memory sink
            resources: Module asset loader; defaults to the configured modules directory
            renderer: View template renderer; defaults to Jinja2
        """
        self.config = config or FrameworkConfig()
        self.presentation: PresentationSink = presentation or InMemoryPresentation()
        self.resources: ResourceLoader = resources or ModuleResources(self.config.modules_dir)
        self.renderer: TemplateRenderer = renderer or JinjaTemplateRenderer()

        self.refresh_rate = self.config.refresh_rate
        self.bindings = BindingTable()
        self.events = EventDispatcher()
        self.config_controls: list[ConfigControl] = []
        self.selected_devices: list[Device] = []
        self.module: ModuleInfo | None = None
        self.lock = RLock()

        self._attached_controls: list[ConfigControl] = []

    # =================================================================
    # Events
    # =================================================================

    def on(self, name: "str | FrameworkEvent", handler: EventHandler) -> bool:
        """
        Set the callback for a framework event, replacing the previous one.

        Unknown event names are reported on `load_error`.
        """
        return self.events.on(name, handler)

    def fire(self, name: "str | FrameworkEvent", payload: Any = None) -> None:
        """Force an event through the framework. Unknown names are ignored."""
        self.events.fire(name, payload)

    def report_error(self, event: FrameworkEvent, error: SwitchboardError) -> None:
        """Log an error and fire it on the given error event."""
        logger.warning(f"{event.value}: {error.technical_message}")
        self.fire(event, error)

    # =================================================================
    # Collaborators and settings
    # =================================================================

    def set_presentation(self, presentation: PresentationSink) -> None:
        """Attach the UI sink. Call before registering write bindings."""
        with self.lock:
            self.presentation = presentation

    def set_selected_devices(self, devices: Iterable[Device]) -> None:
        """Replace the device selection; the first device becomes active."""
        with self.lock:
            self.selected_devices = list(devices)
            logger.info(f"Selected {len(self.selected_devices)} device(s)")
            self.fire(FrameworkEvent.DEVICE_SELECTION, list(self.selected_devices))

    def get_selected_device(self) -> Device | None:
        """Return the active device (head of the selection), or None."""
        if not self.selected_devices:
            return None
        return self.selected_devices[0]

    def close_device(self) -> None:
        """Release the selection and fire `close_device` with the former active device."""
        with self.lock:
            device = self.get_selected_device()
            self.selected_devices = []
            self.fire(FrameworkEvent.CLOSE_DEVICE, device)

    def set_refresh_rate(self, refresh_rate: int) -> None:
        """Set the read cycle period in milliseconds."""
        if not isinstance(refresh_rate, int) or isinstance(refresh_rate, bool) or refresh_rate <= 0:
            self.report_error(
                FrameworkEvent.LOAD_ERROR,
                ConfigValidationError(
                    "refresh_rate", refresh_rate, "must be a positive number of milliseconds"
                ),
            )
            return
        self.refresh_rate = refresh_rate

    def set_config_controls(self, controls: Iterable[ConfigControl | Mapping[str, Any]]) -> None:
        """
        Declare UI controls (not bound to a register) that signal a reconfiguration.

        Each control needs a `selector` and an `event`. Invalid entries are
        reported on `load_error` and skipped. Takes effect on the next
        `establish_config_control_bindings`.
        """
        accepted: list[ConfigControl] = []
        for control in controls:
            try:
                accepted.append(ConfigControl.model_validate(control))
            except ValidationError as e:
                field, _, message = describe_validation_error(e)
                self.report_error(
                    FrameworkEvent.LOAD_ERROR, ConfigValidationError(field, control, message)
                )
        with self.lock:
            self.config_controls = accepted

    # =================================================================
    # Bindings
    # =================================================================

    def put_config_binding(self, new_binding: BindingRecord | Mapping[str, Any]) -> list[BindingRecord]:
        """
        Register a binding between UI element(s) and device register(s).

        The declaration needs:
          - class: free-form category tag
          - template: element id, e.g. ain-0-display or ain-#(0:1)-display
          - binding: register name, e.g. AIN0 or AIN#(0:1)
          - direction: read, write or hybrid
          - event: UI event that triggers a write (write and hybrid only)

        Range notation in `binding` and `template` is expanded and paired
        positionally. The whole declaration is validated and expanded before
        anything is stored, so a failure registers nothing.

        Returns:
            The concrete records registered (empty on failure)
        """
        with self.lock:
            try:
                declared = self._coerce_binding(new_binding)
                pairs = expand_pair(declared.binding, declared.template)
            except ConfigurationError as e:
                self.report_error(FrameworkEvent.LOAD_ERROR, e)
                return []

            records = [declared.with_names(binding, template) for binding, template in pairs]
            for record in records:
                self._register(record)
            return records

    def delete_config_binding(self, binding_name: str) -> list[BindingRecord]:
        """
        Delete previously added binding(s) by element id (template).

        The name may use range notation; each concrete name is removed
        independently and a missing one is reported on `load_error`.

        Returns:
            The records that were removed
        """
        with self.lock:
            try:
                templates = expand_name(binding_name)
            except ConfigurationError as e:
                self.report_error(FrameworkEvent.LOAD_ERROR, e)
                return []

            removed = []
            for template in templates:
                record = self._unregister(template)
                if record is not None:
                    removed.append(record)
            return removed

    def num_bindings(self) -> int:
        return len(self.bindings)

    def establish_config_control_bindings(self) -> None:
        """
        Attach listeners for every config control.

        Call after all config controls have been set. Listeners attached by
        a previous call are detached first.
        """
        with self.lock:
            self._detach_config_controls()
            for control in self.config_controls:
                self.presentation.on(control.selector, control.event, self._on_config_control_event)
            self._attached_controls = list(self.config_controls)
            logger.debug(f"Attached {len(self._attached_controls)} config control listener(s)")

    def on_read(self, values_by_register: Mapping[str, Any]) -> int:
        """
        Push a read snapshot into every read and hybrid binding.

        Registers missing from the snapshot are skipped. This path only
        updates the display; it never writes to the device.

        Returns:
            Number of elements updated
        """
        updated = 0

        def push(record: BindingRecord) -> None:
            nonlocal updated
            if record.binding in values_by_register:
                self.presentation.set_html(record.selector, values_by_register[record.binding])
                updated += 1

        with self.lock:
            self.bindings.for_each_read_binding(push)
        return updated

    # =================================================================
    # Module lifecycle
    # =================================================================

    def set_device_view(
        self,
        template_loc: str,
        json_files: Sequence[str] = (),
        context: Mapping[str, Any] | None = None,
    ) -> str | None:
        """
        Render the module view and place it in the presentation sink.

        Args:
            template_loc: `module/template` reference of the view template
            json_files: `module/file.json` references; exposed to the template
                as `json`, keyed by reference without the `.json` extension
            context: Extra template context

        Returns:
            The rendered view, or None if a resource failed (reported on `load_error`)
        """
        render_context = dict(context or {})
        json_values: dict[str, Any] = {}
        try:
            for location in json_files:
                json_values[location.replace(".json", "")] = self.resources.get_json(
                    self.resources.resolve_external_uri(location)
                )
            render_context["json"] = json_values

            template_text = self.resources.read_text(self.resources.resolve_external_uri(template_loc))
            html = self.renderer.render(template_text, render_context)
        except ResourceError as e:
            self.report_error(FrameworkEvent.LOAD_ERROR, e)
            return None

        with self.lock:
            self.presentation.set_html(self.config.view_selector, html)
            self.fire(FrameworkEvent.LOAD_TEMPLATE, html)
        return html

    def load_module(self, info: ModuleInfo, context: Mapping[str, Any] | None = None) -> None:
        """
        Set up a module from its descriptor.

        Renders the view (when the module has a template), registers every
        binding and config control, attaches the config control listeners
        and fires `module_load`. Each failing binding is reported on its own.
        """
        with self.lock:
            if info.template:
                self.set_device_view(
                    f"{info.name}/{info.template}",
                    [f"{info.name}/{name}" for name in info.json_files],
                    context,
                )
            if info.refresh_rate is not None:
                self.set_refresh_rate(info.refresh_rate)
            for binding in info.bindings:
                self.put_config_binding(binding)
            self.set_config_controls(info.config_controls)
            self.establish_config_control_bindings()

            self.module = info
            logger.info(f"Loaded module {info.name} with {len(self.bindings)} binding(s)")
            self.fire(FrameworkEvent.MODULE_LOAD, info)

    def unload_module(self) -> None:
        """Detach every listener, drop all bindings and fire `unload_module`."""
        with self.lock:
            for record in self.bindings.clear():
                if record.is_writable:
                    self.presentation.off(record.selector, record.event)
            self._detach_config_controls()
            self.config_controls = []

            module, self.module = self.module, None
            self.fire(FrameworkEvent.UNLOAD_MODULE, module)

    # =================================================================
    # Internals
    # =================================================================

    def _coerce_binding(self, new_binding: BindingRecord | Mapping[str, Any]) -> BindingRecord:
        if isinstance(new_binding, BindingRecord):
            return new_binding
        if not isinstance(new_binding, Mapping):
            raise ConfigValidationError("binding", new_binding, "must be a mapping")

        template = new_binding.get("template")
        for field in REQUIRED_BINDING_FIELDS:
            if new_binding.get(field) is None:
                raise BindingFieldMissingError(field, template)

        try:
            direction = Direction(new_binding["direction"])
        except ValueError:
            raise InvalidDirectionError(new_binding["direction"], template) from None

        if direction.is_writable and not new_binding.get("event"):
            raise BindingFieldMissingError("event", template)

        try:
            return BindingRecord.model_validate(dict(new_binding))
        except ValidationError as e:
            raise ConfigValidationError(*describe_validation_error(e)) from e

    def _register(self, record: BindingRecord) -> None:
        previous = self.bindings.put(record)
        pairs = {(r.selector, r.event) for r in (previous, record) if r is not None and r.is_writable}
        for selector, event_name in pairs:
            self._reattach(selector, event_name)
        logger.debug(f"Bound {record.selector} <-> {record.binding} ({record.direction.value})")

    def _unregister(self, template: str) -> BindingRecord | None:
        record = self.bindings.delete(template)
        if record is None:
            self.report_error(FrameworkEvent.LOAD_ERROR, UnknownBindingError(template))
            return None

        if record.is_writable:
            self._reattach(record.selector, record.event)
        logger.debug(f"Unbound {record.selector}")
        return record

    def _make_write_listener(self, record: BindingRecord) -> EventHandler:
        def listener(event: Any) -> None:
            self._write_binding(record, event)
        return listener

    def _write_binding(self, record: BindingRecord, event: Any) -> None:
        with self.lock:
            self.fire(FrameworkEvent.CONFIGURE_DEVICE, event)

            device = self.get_selected_device()
            if device is None:
                self.report_error(FrameworkEvent.CONFIG_ERROR, NoDeviceSelectedError(record.binding))
                return

            value = self.presentation.get_value(record.selector)
            try:
                device.write(record.binding, value)
            except Exception as e:
                error = DeviceWriteError(record.binding, value, str(e))
                error.__cause__ = e
                self.report_error(FrameworkEvent.CONFIG_ERROR, error)
                return

            logger.debug(f"Wrote {record.binding}={value!r}")
            self.fire(FrameworkEvent.DEVICE_CONFIGURED, event)

    def _on_config_control_event(self, event: Any) -> None:
        with self.lock:
            self.fire(FrameworkEvent.CONFIGURE_DEVICE, event)
            self.fire(FrameworkEvent.DEVICE_CONFIGURED, event)

    def _detach_config_controls(self) -> None:
        pairs = {(control.selector, control.event) for control in self._attached_controls}
        self._attached_controls = []
        for selector, event_name in pairs:
            self._reattach(selector, event_name)

    def _reattach(self, selector: str, event_name: str) -> None:
        """
        Detach every handler on selector/event, then attach those of its current owners.

        `off` on the sink removes all handlers of a pair, so a write binding
        and config controls sharing one must be restored together.
        """
        self.presentation.off(selector, event_name)
        for record in self.bindings.write_bindings():
            if record.selector == selector and record.event == event_name:
                self.presentation.on(selector, event_name, self._make_write_listener(record))
        for control in self._attached_controls:
            if control.selector == selector and control.event == event_name:
                self.presentation.on(selector, event_name, self._on_config_control_event)
