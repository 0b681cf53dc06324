"""
Tests for the contact models and their property registries.
"""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from phonebook.errors import UnknownFieldError
from phonebook.models import Contact, Organization, Person
from phonebook.validation import validate_phone
import phonebook.models.contact as contact_module


def _warnings(caplog):
    return [r.getMessage() for r in caplog.records if r.levelname == "WARNING"]


class TestPerson:
    def test_describe_shows_all_fields(self, ann):
        lines = []
        ann.describe(lines.append)
        text = lines[0]

        assert "Name: Ann" in text
        assert "Surname: Lee" in text
        assert "Birth date: 1990-01-01" in text
        assert "Gender: F" in text
        assert "Number: +1-234-5678" in text
        assert text.splitlines()[-2].startswith("Time created: ")
        assert text.splitlines()[-1].startswith("Time last edit: ")

    def test_field_names_in_edit_order(self, ann):
        assert ann.list_field_names() == ["name", "surname", "birth", "gender", "number"]

    def test_invalid_gender_is_cleared_on_construction(self, caplog):
        person = Person(name="Sam", surname="Ray", birthdate="", gender="X", phone_number="")
        assert person.gender == ""
        assert _warnings(caplog) == ["Bad gender!"]

    def test_invalid_birthdate_and_number_are_cleared_on_construction(self, caplog):
        person = Person(name="Sam", surname="Ray", birthdate="32/13/1999", gender="M", phone_number="abc!!")
        assert person.birthdate == ""
        assert person.phone_number == ""
        assert person.gender == "M"
        assert sorted(_warnings(caplog)) == ["Bad birth date!", "Wrong number format!"]

    def test_placeholders_for_missing_data(self):
        person = Person(name="Sam", surname="Ray")
        text = person.details()
        assert "Birth date: [no data]" in text
        assert "Gender: [no data]" in text
        assert "Number: [no number]" in text

    def test_search_key_uses_raw_values(self):
        person = Person(name="Sam", surname="Ray", gender="M")
        assert person.search_key() == "Sam\nRay\n\nM\n"

    def test_display_label(self, ann):
        assert ann.display_label() == "Ann Lee"
        assert str(ann) == "Ann Lee"

    def test_update_validated_fields(self, ann, caplog):
        ann.update_field("birth", "2001-12-31")
        ann.update_field("gender", "M")
        assert ann.birthdate == "2001-12-31"
        assert ann.gender == "M"

        ann.update_field("birth", "31-12-2001")
        ann.update_field("gender", "male")
        assert ann.birthdate == ""
        assert ann.gender == ""
        assert _warnings(caplog) == ["Bad birth date!", "Bad gender!"]

    def test_update_plain_fields_keeps_raw_value(self, ann):
        ann.update_field("name", "  Anna!! ")
        ann.update_field("surname", "")
        assert ann.name == "  Anna!! "
        assert ann.surname == ""
        assert ann.field_value("name") == "  Anna!! "


class TestOrganization:
    def test_describe(self, acme):
        text = acme.details()
        assert text.splitlines()[:3] == [
            "Organization name: Acme",
            "Address: 1 Main St, Leeds",
            "Number: +44 20 7123 4567",
        ]

    def test_registry_and_search_key(self, acme):
        assert acme.list_field_names() == ["name", "address", "number"]
        assert acme.search_key() == "Acme\n1 Main St, Leeds\n+44 20 7123 4567"
        assert acme.display_label() == "Acme"

    def test_invalid_number_on_construction(self, caplog):
        org = Organization(name="Shop", address="", phone_number="12 (3)")
        assert org.phone_number == ""
        assert _warnings(caplog) == ["Wrong number format!"]
        assert "Number: [no number]" in org.details()


class TestEditing:
    @pytest.mark.parametrize("value", ["+1-234-5678", "(555) 123-4567", "abc!!", "1 2", ""])
    @pytest.mark.parametrize("make", [
        lambda: Person(name="A", surname="B"),
        lambda: Organization(name="C"),
    ])
    def test_number_is_either_the_value_or_empty(self, make, value):
        contact = make()
        contact.update_field("number", value)
        assert contact.phone_number == (value if validate_phone(value) else "")

    def test_bad_number_edit_clears_number_and_stamps_edit_time(self, ann, monkeypatch, caplog):
        later = ann.edited_at + timedelta(minutes=5)
        monkeypatch.setattr(contact_module, "utcnow", lambda: later)

        ann.update_field("number", "abc!!")

        assert ann.phone_number == ""
        assert ann.edited_at == later
        assert ann.created_at < later
        assert _warnings(caplog) == ["Wrong number format!"]

    def test_unknown_field_is_a_programmer_error(self, acme):
        with pytest.raises(UnknownFieldError) as excinfo:
            acme.update_field("surname", "x")
        assert isinstance(excinfo.value, KeyError)
        assert "surname" in str(excinfo.value)

    def test_registry_is_bound_per_instance(self):
        first = Person(name="One")
        second = Person(name="Two")
        first.update_field("name", "Uno")
        assert first.name == "Uno"
        assert second.name == "Two"


class TestTimestamps:
    def test_created_and_edited_start_equal(self, ann):
        assert ann.created_at == ann.edited_at
        assert ann.created_at.tzinfo == timezone.utc

    def test_created_at_is_immutable(self, ann):
        with pytest.raises(ValidationError):
            ann.created_at = datetime.now(timezone.utc)

    def test_timestamps_are_printed_without_microseconds(self):
        stamp = datetime(2024, 3, 1, 9, 30, 15, 123456, tzinfo=timezone.utc)
        org = Organization(name="Acme", created_at=stamp)
        assert "Time created: 2024-03-01T09:30:15" in org.details()
        assert "Time last edit: 2024-03-01T09:30:15" in org.details()


def test_contact_is_abstract():
    with pytest.raises(TypeError):
        Contact(phone_number="123")
