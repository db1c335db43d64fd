"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Tests for model JSON mapping.
"""

import pytest

from cumulocity.exceptions import DecodeError
from cumulocity.models import (
    Alarm,
    AlarmCollection,
    AlarmStatus,
    Group,
    ManagedObject,
    SourceReference,
    UserReference,
)
from cumulocity.models.base import camel_case


class TestCamelCase:
    @pytest.mark.parametrize(
        "attr,expected",
        [
            ("id", "id"),
            ("creation_time", "creationTime"),
            ("first_occurrence_time", "firstOccurrenceTime"),
            ("self_", "self"),
        ],
    )
    def test_conversion(self, attr, expected):
        assert camel_case(attr) == expected


class TestModelMapping:
    def test_json_names_use_declared_overrides(self):
        names = Alarm.json_names()
        assert "self" in names
        assert "creationTime" in names
        assert "custom_fragments" not in names
        assert "customFragments" not in names

    def test_nested_models_decode(self):
        collection = AlarmCollection.from_dict(
            {
                "self": "https://t/alarm/alarms",
                "statistics": {"currentPage": 1, "pageSize": 5},
                "alarms": [{"id": "1", "status": "ACTIVE", "source": {"id": "10"}}],
            }
        )
        assert collection.self_ == "https://t/alarm/alarms"
        assert collection.statistics.page_size == 5
        assert collection.alarms[0].status is AlarmStatus.ACTIVE
        assert collection.alarms[0].source == SourceReference(id="10")

    def test_fragments_round_trip_on_managed_object(self):
        data = {"id": "7", "name": "Pump", "c8y_IsDevice": {}, "c8y_Hardware": {"model": "X"}}
        device = ManagedObject.from_dict(data)

        assert device.c8y_is_device == {}
        assert device.custom_fragments == {"c8y_Hardware": {"model": "X"}}
        assert device.to_dict() == data

    def test_declared_member_wins_over_fragment(self):
        alarm = Alarm(text="declared", custom_fragments={"text": "fragment"})
        assert alarm.to_dict() == {"text": "declared"}

    def test_models_without_fragments_ignore_unknown_members(self):
        ref = SourceReference.from_dict({"id": "1", "extra": True})
        assert ref == SourceReference(id="1")

    def test_missing_members_default_to_none(self):
        alarm = Alarm.from_dict({})
        assert alarm.id is None
        assert alarm.custom_fragments == {}

    def test_null_members_are_treated_as_absent(self):
        assert Alarm.from_dict({"text": None}).text is None

    def test_non_object_raises(self):
        with pytest.raises(DecodeError, match="expected object"):
            Alarm.from_dict(["not", "an", "object"])

    def test_invalid_enum_value_raises(self):
        with pytest.raises(DecodeError, match="AlarmStatus"):
            Alarm.from_dict({"status": "EXPLODED"})

    def test_bool_is_not_an_int(self):
        with pytest.raises(DecodeError):
            Group.from_dict({"id": True})

    def test_forward_reference_resolves(self):
        ref = UserReference.from_dict({"user": {"userName": "jdoe"}})
        assert ref.user.user_name == "jdoe"

    def test_error_location_names_the_member(self):
        with pytest.raises(DecodeError, match=r"AlarmCollection\.alarms\[0\]\.count"):
            AlarmCollection.from_dict({"alarms": [{"count": "x"}]})
