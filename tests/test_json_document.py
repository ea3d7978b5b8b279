from __future__ import annotations

import json

import pytest

from dbtypes import (
    BinaryFormatError,
    ConversionError,
    Date,
    JSONDocument,
    SerializationError,
    json_default,
    new_date,
)


def test_scan_accepts_json_object_bytes() -> None:
    document = JSONDocument.scan(b'{"name": "Ada", "tags": [1, 2], "nested": {"ok": true}}')

    assert isinstance(document, JSONDocument)
    assert document == {"name": "Ada", "tags": [1, 2], "nested": {"ok": True}}


def test_scan_accepts_text_and_mappings() -> None:
    assert JSONDocument.scan('{"a": 1}') == {"a": 1}
    assert JSONDocument.scan({"a": 1}) == {"a": 1}


@pytest.mark.parametrize("value", [b"[1, 2]", b'"text"', b"{broken", 3, None])
def test_scan_rejects_non_objects(value: object) -> None:
    with pytest.raises(ConversionError):
        JSONDocument.scan(value)


def test_storage_value_is_lossless() -> None:
    document = JSONDocument({"b": 1, "a": "x", "c": [None, 1.5]})

    assert json.loads(document.to_storage_value()) == document


def test_embedded_dates_are_serialized() -> None:
    document = JSONDocument({"born": new_date(2015, 10, 21), "gone": Date()})

    assert document.to_storage_value() == '{"born":"2015-10-21","gone":null}'


def test_unserializable_values_raise() -> None:
    with pytest.raises(SerializationError):
        JSONDocument({"value": float("nan")}).to_storage_value()
    with pytest.raises(SerializationError):
        JSONDocument({"value": object()}).to_storage_value()


def test_json_default_rejects_unknown_types() -> None:
    with pytest.raises(TypeError, match="not JSON serializable"):
        json_default(object())


def test_json_and_binary_round_trip() -> None:
    document = JSONDocument({"name": "Ada", "count": 3})

    assert JSONDocument.unmarshal_json(document.marshal_json()) == document
    assert JSONDocument.decode_binary(document.encode_binary()) == document


def test_decode_binary_rejects_garbage() -> None:
    with pytest.raises(BinaryFormatError, match="error decoding JSON"):
        JSONDocument.decode_binary(b"\x00\x01")


def test_orm_data_type() -> None:
    assert JSONDocument.orm_data_type() == "jsonb"
