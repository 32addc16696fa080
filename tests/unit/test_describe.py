"""Tests for the human-readable record representation."""

from typing import Optional

from recordbase import Column, RecordBase
from recordbase.settings import reload_settings


class Item(RecordBase):
    id = Column(int)
    name = Column(str)
    tags = Column(list[str])


class Reading(RecordBase):
    sensor = Column(Optional[str], name="sensor_code")
    value = Column(float)
    active = Column(bool)


class Empty(RecordBase):
    pass


class TestDescribe:
    """Test RecordBase.describe() and its str()/repr() aliases."""

    def test_reference_example(self):
        """Test the documented rendering of ints, text and arrays."""
        item = Item(id=1, name="a", tags=["x", "y"])

        assert item.describe() == 'Item(id: 1, name: "a", tags: [x, y])'

    def test_none_renders_null_token(self):
        """Test that unset columns render as NULL."""
        assert Item().describe() == "Item(id: NULL, name: NULL, tags: NULL)"

    def test_none_inside_array(self):
        """Test that None elements of an array also render as NULL."""
        item = Item(id=1, name="a", tags=["x", None])

        assert item.describe().endswith("tags: [x, NULL])")

    def test_uses_column_names_and_optional_text(self):
        """Test renamed columns and Optional[str] quoting."""
        reading = Reading(sensor="t-1", value=2.5, active=True)

        assert reading.describe() == 'Reading(sensor_code: "t-1", value: 2.5, active: True)'

    def test_non_textual_column_holding_text_is_not_quoted(self):
        """Test that quoting follows the declared type, not the value."""
        item = Item(id="7")

        assert item.describe().startswith("Item(id: 7, ")

    def test_record_without_columns(self):
        """Test a record type that declares no column."""
        assert Empty().describe() == "Empty()"

    def test_str_and_repr(self):
        """Test that str() and repr() both describe the record."""
        item = Item(id=2, name="b", tags=[])

        assert str(item) == repr(item) == 'Item(id: 2, name: "b", tags: [])'

    def test_configured_null_token(self, monkeypatch):
        """Test that the null token comes from settings."""
        monkeypatch.setenv("RECORDBASE_NULL_TOKEN", "<null>")
        reload_settings()

        assert Item(id=1).describe() == "Item(id: 1, name: <null>, tags: <null>)"
