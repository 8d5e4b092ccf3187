"""Binding table: all concrete bindings plus read and write views."""

import logging
from collections.abc import Callable, Iterator

from switchboard.models import BindingRecord

logger = logging.getLogger(__name__)


class BindingTable:
    """
    Concrete bindings keyed by UI element identifier (`template`).

    Hybrid records are indexed in both the read and the write view. Every
    mutation updates all three mappings together.
    """

    def __init__(self) -> None:
        self._bindings: dict[str, BindingRecord] = {}
        self._read_bindings: dict[str, BindingRecord] = {}
        self._write_bindings: dict[str, BindingRecord] = {}

    def put(self, record: BindingRecord) -> BindingRecord | None:
        """
        Store a record under its template, replacing any existing one.

        Returns:
            The record that was replaced, or None
        """
        previous = self._remove(record.template)

        self._bindings[record.template] = record
        if record.is_readable:
            self._read_bindings[record.template] = record
        if record.is_writable:
            self._write_bindings[record.template] = record
        return previous

    def get(self, template: str) -> BindingRecord | None:
        return self._bindings.get(template)

    def delete(self, template: str) -> BindingRecord | None:
        """
        Remove the record stored under `template` from every view.

        Returns:
            The removed record, or None if nothing was stored there
        """
        return self._remove(template)

    def clear(self) -> list[BindingRecord]:
        """Remove every record and return them."""
        records = list(self._bindings.values())
        self._bindings.clear()
        self._read_bindings.clear()
        self._write_bindings.clear()
        return records

    def read_bindings(self) -> list[BindingRecord]:
        return list(self._read_bindings.values())

    def write_bindings(self) -> list[BindingRecord]:
        return list(self._write_bindings.values())

    def for_each_read_binding(self, fn: Callable[[BindingRecord], None]) -> None:
        """Call `fn` for every record in the read view (on a snapshot of the view)."""
        for record in list(self._read_bindings.values()):
            fn(record)

    def is_read_binding(self, template: str) -> bool:
        return template in self._read_bindings

    def is_write_binding(self, template: str) -> bool:
        return template in self._write_bindings

    def _remove(self, template: str) -> BindingRecord | None:
        record = self._bindings.pop(template, None)
        self._read_bindings.pop(template, None)
        self._write_bindings.pop(template, None)
        return record

    def __contains__(self, template: object) -> bool:
        return template in self._bindings

    def __len__(self) -> int:
        return len(self._bindings)

    def __iter__(self) -> Iterator[BindingRecord]:
        return iter(list(self._bindings.values()))
