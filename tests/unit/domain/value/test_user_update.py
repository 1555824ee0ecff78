"""Unit tests for UserUpdate and field change markers."""

from roster.domain.value import ABSENT, Absent, Present, UserUpdate
from roster.domain.value.types import from_optional, is_valid_age, is_valid_email


class TestFieldChange:
    """Tests for the Present/ABSENT markers."""

    def test_absent_is_a_falsy_singleton(self):
        """ABSENT is unique and falsy."""
        assert Absent() is ABSENT
        assert not ABSENT
        assert repr(ABSENT) == "ABSENT"

    def test_from_optional_maps_none_to_absent(self):
        """None means the field was not sent."""
        assert from_optional(None) is ABSENT

    def test_from_optional_keeps_blank_strings(self):
        """Blank strings are present; the reconciler decides what they mean."""
        assert from_optional("") == Present("")
        assert from_optional(0) == Present(0)


class TestUserUpdate:
    """Tests for UserUpdate."""

    def test_default_update_is_empty(self):
        """No fields means an empty update."""
        assert UserUpdate().is_empty

    def test_from_optionals_marks_supplied_fields(self):
        """Only non-None values become present."""
        # Act
        update = UserUpdate.from_optionals(name="Ivan", age=30)

        # Assert
        assert update.name == Present("Ivan")
        assert update.email is ABSENT
        assert update.age == Present(30)
        assert not update.is_empty


class TestValidators:
    """Tests for email and age checks."""

    def test_email_format(self):
        """Addresses need a local part, an @ and a dotted domain."""
        assert is_valid_email("ivan@example.com")
        assert not is_valid_email("ivan@example")
        assert not is_valid_email("ivan example@x.com")
        assert not is_valid_email("@x.com")

    def test_age_bounds_are_inclusive(self):
        """1 and 150 are valid, 0 and 151 are not."""
        assert is_valid_age(1)
        assert is_valid_age(150)
        assert not is_valid_age(0)
        assert not is_valid_age(151)
