"""Tests for structural equality, null-safe operators and hashing."""

from recordbase import Column, RecordBase, records_equal, records_not_equal
from recordbase.records import values_equal
from recordbase.settings import reload_settings


class Item(RecordBase):
    id = Column(int)
    name = Column(str)
    tags = Column(list[str])


class TaggedItem(Item):
    pass


class Other(RecordBase):
    id = Column(int)
    name = Column(str)
    tags = Column(list[str])


class Point(RecordBase):
    __structural_hash__ = True

    x = Column(int)
    y = Column(int)
    path = Column(list[int])


class Profile(RecordBase):
    __structural_hash__ = True

    id = Column(int)
    attributes = Column(dict)
    roles = Column(set)


class TestEquals:
    """Test RecordBase.equals()."""

    def test_reflexive(self):
        """Test that a record equals itself."""
        item = Item(id=1, name="a", tags=["x"])

        assert item.equals(item)
        assert item == item

    def test_identical_values_are_equal(self):
        """Test that distinct records with the same values are equal, symmetrically."""
        a = Item(id=1, name="a", tags=["x", "y"])
        b = Item(id=1, name="a", tags=["x", "y"])

        assert a is not b
        assert a.equals(b) and b.equals(a)
        assert a == b
        assert not (a != b)

    def test_differing_column(self):
        """Test that one differing column makes records unequal."""
        a = Item(id=1, name="a", tags=["x"])
        b = Item(id=1, name="b", tags=["x"])

        assert not a.equals(b)
        assert a != b

    def test_none_columns(self):
        """Test None against None and None against a value."""
        assert Item(id=1).equals(Item(id=1))
        assert not Item(id=1, name="a").equals(Item(id=1))
        assert not Item(id=1).equals(Item(id=1, name="a"))

    def test_arrays_compare_element_wise(self):
        """Test that arrays are compared by content, not identity or container type."""
        assert Item(tags=["x", "y"]).equals(Item(tags=("x", "y")))
        assert not Item(tags=["x", "y"]).equals(Item(tags=["x"]))
        assert not Item(tags=["x", "y"]).equals(Item(tags=["y", "x"]))

    def test_equals_none(self):
        """Test that no record equals None."""
        assert not Item().equals(None)
        assert Item() != None  # noqa: E711

    def test_type_exact(self):
        """Test that records of different types never compare equal, even subclasses."""
        assert not Item(id=1).equals(Other(id=1))
        assert not Item(id=1).equals(TaggedItem(id=1))
        assert not TaggedItem(id=1).equals(Item(id=1))
        assert Item(id=1) != TaggedItem(id=1)

    def test_non_record_operand(self):
        """Test comparing against a value that is not a record."""
        assert not Item(id=1).equals({"id": 1})
        assert Item(id=1) != {"id": 1}


class TestNullSafeOperators:
    """Test records_equal() and records_not_equal()."""

    def test_two_nones(self):
        assert records_equal(None, None)
        assert not records_not_equal(None, None)

    def test_none_and_record(self):
        item = Item(id=1)

        assert not records_equal(None, item)
        assert not records_equal(item, None)
        assert records_not_equal(None, item)

    def test_delegates_to_equals(self):
        assert records_equal(Item(id=1), Item(id=1))
        assert records_not_equal(Item(id=1), Item(id=2))


class TestValuesEqual:
    """Test the column value equality rule."""

    def test_nested_arrays(self):
        assert values_equal([[1, 2], [3]], [(1, 2), (3,)])
        assert not values_equal([[1, 2], [3]], [[1, 2], [3, 4]])

    def test_string_is_not_an_array(self):
        assert not values_equal("ab", ["a", "b"])


class TestHashing:
    """Test identity and structural hashing."""

    def test_identity_hash_by_default(self):
        """Test that equal records stay distinct set members by default."""
        a = Item(id=1, name="a", tags=["x"])
        b = Item(id=1, name="a", tags=["x"])

        assert a == b
        assert hash(a) == object.__hash__(a)
        assert len({a, b}) == 2

    def test_structural_hash_class_opt_in(self):
        """Test that __structural_hash__ makes equal records hash equal."""
        a = Point(x=1, y=2, path=[1, 2])
        b = Point(x=1, y=2, path=(1, 2))

        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_structural_hash_with_dict_and_set_columns(self):
        """Test structural hashing of records holding unhashable column values."""
        a = Profile(id=1, attributes={"team": "core", "levels": [1, 2]}, roles={"admin", "dev"})
        b = Profile(id=1, attributes={"levels": [1, 2], "team": "core"}, roles={"dev", "admin"})

        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_structural_hash_setting(self, monkeypatch):
        """Test enabling structural hashing for every record type through settings."""
        monkeypatch.setenv("RECORDBASE_STRUCTURAL_HASH", "true")
        reload_settings()

        a = Item(id=1, name="a", tags=["x"])
        b = Item(id=1, name="a", tags=["x"])

        assert hash(a) == hash(b)
        assert {a: "first"}[b] == "first"

