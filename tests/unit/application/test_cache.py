"""Unit tests for application cache – CacheKey, JsonRecordCodec, InMemoryCacheStore."""
from __future__ import annotations

import json
from datetime import timedelta
from typing import Any

import pytest
from hypothesis import given

from refcache.application.cache import (
    CacheKey,
    CacheStore,
    InMemoryCacheStore,
    JsonRecordCodec,
    RecordCodec,
)
from refcache.application.regions import Region, region_codec
from refcache.kernel.errors import SerializationError, ValidationError
from refcache.kernel.types import Fault, Miss, Ok
from refcache.testing.fakes import FakeClock
from refcache.testing.generators import json_record_strategy, region_collection_strategy


# ---------------------------------------------------------------------------
# CacheKey
# ---------------------------------------------------------------------------


class TestCacheKey:
    def test_for_children_concatenates_prefix_and_parent(self) -> None:
        assert CacheKey.for_children("region:", 42) == "region:42"

    def test_for_children_with_string_parent(self) -> None:
        assert CacheKey.for_children("region:", "11680") == "region:11680"

    def test_for_children_rejects_empty_key(self) -> None:
        with pytest.raises(ValidationError):
            CacheKey.for_children("", "")


# ---------------------------------------------------------------------------
# JsonRecordCodec
# ---------------------------------------------------------------------------


class TestJsonRecordCodec:
    def test_is_a_record_codec(self) -> None:
        assert isinstance(JsonRecordCodec(), RecordCodec)

    def test_encode_is_compact_json_array(self) -> None:
        text = JsonRecordCodec().encode([{"id": 1, "name": "Gangnam"}])
        assert text == '[{"id":1,"name":"Gangnam"}]'

    def test_encode_keeps_non_ascii_verbatim(self) -> None:
        text = JsonRecordCodec().encode([{"name": "강남구"}])
        assert "강남구" in text

    def test_empty_sequence_round_trips(self) -> None:
        codec: JsonRecordCodec[Any] = JsonRecordCodec()
        assert codec.encode([]) == "[]"
        assert codec.decode("[]") == []

    def test_decode_accepts_bytes(self) -> None:
        assert JsonRecordCodec().decode('[{"id":1}]'.encode()) == [{"id": 1}]

    @pytest.mark.parametrize(
        "text",
        ["", "{", "null", '{"a":1}', "3.5", "[" * 100_000 + "]" * 100_000],
        ids=["empty", "truncated", "null", "object", "number", "deeply-nested"],
    )
    def test_decode_rejects_non_array(self, text: str) -> None:
        with pytest.raises(SerializationError):
            JsonRecordCodec().decode(text)

    def test_decode_wraps_conversion_errors(self) -> None:
        codec = region_codec()
        with pytest.raises(SerializationError) as info:
            codec.decode('[{"name": "no id"}]')
        assert info.value.payload_type == "Region"
        assert isinstance(info.value.__cause__, KeyError)

    def test_decode_wraps_non_finite_ids(self) -> None:
        with pytest.raises(SerializationError) as info:
            region_codec().decode('[{"id": Infinity, "name": "x"}]')
        assert isinstance(info.value.__cause__, OverflowError)

    def test_encode_wraps_unserialisable_records(self) -> None:
        with pytest.raises(SerializationError):
            JsonRecordCodec().encode([{"when": object()}])

    def test_encode_wraps_deeply_nested_records(self) -> None:
        nested: list[Any] = []
        for _ in range(100_000):
            nested = [nested]
        with pytest.raises(SerializationError) as info:
            JsonRecordCodec().encode([{"tree": nested}])
        assert isinstance(info.value.__cause__, RecursionError)

    def test_region_codec_layout_is_stable(self) -> None:
        text = region_codec().encode([Region(id=1, name="Gangnam", parent_id=42, level=2, code="11680")])
        assert json.loads(text) == [
            {"id": 1, "name": "Gangnam", "parent_id": 42, "level": 2, "code": "11680"}
        ]

    @given(region_collection_strategy())
    def test_region_round_trip(self, regions: list[Region]) -> None:
        codec = region_codec()
        assert codec.decode(codec.encode(regions)) == regions

    @given(json_record_strategy())
    def test_dict_record_round_trip(self, record: dict[str, Any]) -> None:
        codec: JsonRecordCodec[dict[str, Any]] = JsonRecordCodec()
        assert codec.decode(codec.encode([record, record])) == [record, record]


# ---------------------------------------------------------------------------
# InMemoryCacheStore
# ---------------------------------------------------------------------------


class TestInMemoryCacheStore:
    def test_satisfies_port(self) -> None:
        assert isinstance(InMemoryCacheStore(), CacheStore)

    def test_get_missing_is_miss(self) -> None:
        assert InMemoryCacheStore().get("nope") == Miss()

    def test_set_then_get(self) -> None:
        store = InMemoryCacheStore()
        assert store.set("k", "v", timedelta(seconds=10)) == Ok(None)
        assert store.get("k") == Ok("v")
        assert "k" in store

    def test_set_overwrites(self) -> None:
        store = InMemoryCacheStore()
        store.set("k", "a", timedelta(seconds=10))
        store.set("k", "b", timedelta(seconds=10))
        assert store.get("k") == Ok("b")

    def test_entry_expires_after_ttl(self) -> None:
        clock = FakeClock()
        store = InMemoryCacheStore(clock)
        store.set("k", "v", timedelta(seconds=30))

        clock.advance(seconds=29)
        assert store.get("k") == Ok("v")
        clock.advance(seconds=1)
        assert store.get("k") == Miss()
        assert len(store) == 0

    def test_len_ignores_expired_entries(self) -> None:
        clock = FakeClock()
        store = InMemoryCacheStore(clock)
        store.set("short", "v", timedelta(seconds=5))
        store.set("long", "v", timedelta(days=60))
        assert len(store) == 2

        clock.advance(seconds=5)
        assert len(store) == 1
        assert store.raw("short") is None
        assert store.raw("long") == "v"

    def test_non_positive_ttl_is_fault(self) -> None:
        outcome = InMemoryCacheStore().set("k", "v", timedelta(0))
        assert isinstance(outcome, Fault)

    def test_clear(self) -> None:
        store = InMemoryCacheStore()
        store.set("k", "v", timedelta(seconds=10))
        store.clear()
        assert store.get("k") == Miss()
        assert store.raw("k") is None
