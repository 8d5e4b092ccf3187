"""Tests for the binding table."""

import pytest

from switchboard.core import BindingTable
from switchboard.models import BindingRecord, Direction


def make_record(template, binding="AIN0", direction=Direction.READ, event=None):
    return BindingRecord(
        binding_class="test", template=template, binding=binding, direction=direction, event=event
    )


@pytest.mark.unit
class TestBindingTable:
    """Test views and mutation of the binding table."""

    @pytest.fixture
    def table(self):
        return BindingTable()

    def test_read_record_is_only_in_read_view(self, table):
        table.put(make_record("ain-0"))

        assert table.is_read_binding("ain-0")
        assert not table.is_write_binding("ain-0")
        assert len(table) == 1

    def test_write_record_is_only_in_write_view(self, table):
        table.put(make_record("dac-0", "DAC0", Direction.WRITE, "change"))

        assert table.is_write_binding("dac-0")
        assert not table.is_read_binding("dac-0")

    def test_hybrid_record_is_in_both_views(self, table):
        table.put(make_record("dac-0", "DAC0", Direction.HYBRID, "change"))

        assert table.is_read_binding("dac-0")
        assert table.is_write_binding("dac-0")

    def test_put_overwrites(self, table):
        first = make_record("el", "AIN0")
        second = make_record("el", "AIN1")

        assert table.put(first) is None
        assert table.put(second) == first
        assert len(table) == 1
        assert table.get("el").binding == "AIN1"

    def test_overwrite_with_new_direction_updates_views(self, table):
        table.put(make_record("el", direction=Direction.HYBRID, event="change"))
        table.put(make_record("el", direction=Direction.READ))

        assert table.is_read_binding("el")
        assert not table.is_write_binding("el")

    def test_delete_removes_from_all_views(self, table):
        record = make_record("el", direction=Direction.HYBRID, event="change")
        table.put(record)

        assert table.delete("el") == record
        assert "el" not in table
        assert not table.is_read_binding("el")
        assert not table.is_write_binding("el")

    def test_delete_missing(self, table):
        assert table.delete("missing") is None

    def test_for_each_read_binding(self, table):
        table.put(make_record("a", "AIN0"))
        table.put(make_record("b", "DAC0", Direction.WRITE, "change"))
        table.put(make_record("c", "DAC1", Direction.HYBRID, "change"))

        seen = []
        table.for_each_read_binding(lambda record: seen.append(record.template))

        assert sorted(seen) == ["a", "c"]
        assert sorted(r.template for r in table.write_bindings()) == ["b", "c"]

    def test_clear(self, table):
        table.put(make_record("a"))
        table.put(make_record("b", direction=Direction.WRITE, event="change"))

        removed = table.clear()

        assert len(removed) == 2
        assert len(table) == 0
        assert table.read_bindings() == []
        assert table.write_bindings() == []
