"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Tests for JSON encoding and decoding.
"""

import json
from typing import List

import pytest

from cumulocity.core.codec import clear_fields, decode, decode_error, encode
from cumulocity.exceptions import DecodeError, EncodeError
from cumulocity.models.alarms import Alarm, AlarmSeverity
from cumulocity.models.common import C8yError, SourceReference
from cumulocity.models.identity import ExternalId


class TestClearFields:
    def test_removes_top_level_and_nested_members(self):
        data = {"id": "1", "self": "s", "source": {"id": "2", "self": "s2"}, "text": "t"}
        clear_fields(data, ("id", "self", "source.self"))
        assert data == {"source": {"id": "2"}, "text": "t"}

    def test_missing_paths_are_ignored(self):
        data = {"text": "t"}
        clear_fields(data, ("id", "source.self", "a.b.c"))
        assert data == {"text": "t"}

    def test_nested_path_through_scalar_is_ignored(self):
        data = {"source": "not-an-object"}
        clear_fields(data, ("source.self",))
        assert data == {"source": "not-an-object"}


class TestEncode:
    def test_server_managed_id_is_not_sent(self):
        alarm = Alarm(id="123", text="overheating", severity=AlarmSeverity.MAJOR)
        body = json.loads(encode(alarm, clear=("id",)))
        assert "id" not in body
        assert body == {"text": "overheating", "severity": "MAJOR"}

    def test_unset_members_are_omitted(self):
        body = json.loads(encode(ExternalId(external_id="SN-1", type="c8y_Serial")))
        assert body == {"externalId": "SN-1", "type": "c8y_Serial"}

    def test_custom_fragments_are_written(self):
        alarm = Alarm(text="t", custom_fragments={"c8y_Position": {"lat": 1.5}})
        assert json.loads(encode(alarm)) == {"text": "t", "c8y_Position": {"lat": 1.5}}

    def test_plain_dict(self):
        assert json.loads(encode({"a": 1, "b": None})) == {"a": 1, "b": None}

    def test_list_of_models(self):
        body = json.loads(encode([SourceReference(id="1"), SourceReference(id="2")]))
        assert body == [{"id": "1"}, {"id": "2"}]

    def test_nan_raises_encode_error(self):
        with pytest.raises(EncodeError):
            encode({"value": float("nan")})

    def test_unserializable_value_raises_encode_error(self):
        with pytest.raises(EncodeError):
            encode({"value": object()})


class TestDecode:
    def test_none_ignores_body(self):
        assert decode(b"anything", None) is None

    def test_bytes_returns_raw_body(self):
        assert decode(b"\x00\x01", bytes) == b"\x00\x01"

    def test_int_from_plain_text(self):
        assert decode(b"42\n", int) == 42

    def test_int_rejects_text(self):
        with pytest.raises(DecodeError):
            decode(b"many", int)

    def test_str_plain_and_json(self):
        assert decode(b"AVAILABLE", str) == "AVAILABLE"
        assert decode(b'"AVAILABLE"', str) == "AVAILABLE"

    def test_dict(self):
        assert decode(b'{"a": 1}', dict) == {"a": 1}

    def test_dict_rejects_array(self):
        with pytest.raises(DecodeError):
            decode(b"[]", dict)

    def test_model(self):
        alarm = decode(b'{"id": "1", "severity": "MINOR", "unknownMember": 3}', Alarm)
        assert alarm.id == "1"
        assert alarm.severity is AlarmSeverity.MINOR
        assert alarm.custom_fragments == {"unknownMember": 3}

    def test_list_of_models(self):
        refs = decode(b'[{"id": "1"}, {"id": "2"}]', List[SourceReference])
        assert [ref.id for ref in refs] == ["1", "2"]

    def test_list_rejects_object(self):
        with pytest.raises(DecodeError):
            decode(b'{"id": "1"}', List[SourceReference])

    def test_invalid_json_raises(self):
        with pytest.raises(DecodeError):
            decode(b"<html>", Alarm)

    def test_type_mismatch_raises(self):
        with pytest.raises(DecodeError, match="count"):
            decode(b'{"count": "three"}', Alarm)


class TestDecodeError:
    def test_error_shaped_body(self):
        error = decode_error(b'{"error": "security/Unauthorized", "message": "Invalid credentials", "x": 1}')
        assert error == C8yError(error="security/Unauthorized", message="Invalid credentials")

    def test_empty_body(self):
        assert decode_error(b"") is None

    def test_non_json_body(self):
        assert decode_error(b"Gateway Timeout") is None

    def test_json_without_error_members(self):
        assert decode_error(b'{"status": 500}') is None

    def test_json_array(self):
        assert decode_error(b'["error"]') is None
