"""Unit tests for kernel outcome types – Ok, Miss, Fault."""

from __future__ import annotations

import pytest

from refcache.kernel.errors import CacheStoreError
from refcache.kernel.types import CacheOutcome, Fault, Miss, Ok


def _describe(outcome: CacheOutcome[str]) -> str:
    match outcome:
        case Ok(value=value):
            return f"ok:{value}"
        case Miss():
            return "miss"
        case Fault(reason=reason):
            return f"fault:{reason}"
    return "unknown"


class TestOk:
    def test_value(self) -> None:
        ok = Ok(42)
        assert ok.value == 42
        assert ok.unwrap() == 42
        assert ok.unwrap_or(0) == 42

    def test_predicates(self) -> None:
        assert Ok(1).is_ok()
        assert not Ok(1).is_miss()
        assert not Ok(1).is_fault()

    def test_map(self) -> None:
        assert Ok(2).map(lambda x: x * 3) == Ok(6)

    def test_equality(self) -> None:
        assert Ok("a") == Ok("a")
        assert Ok("a") != Ok("b")
        assert Ok(None) != Miss()

    def test_repr(self) -> None:
        assert repr(Ok("v")) == "Ok('v')"


class TestMiss:
    def test_unwrap_raises(self) -> None:
        with pytest.raises(KeyError):
            Miss().unwrap()

    def test_unwrap_or(self) -> None:
        assert Miss().unwrap_or("d") == "d"

    def test_predicates_and_map(self) -> None:
        miss = Miss()
        assert miss.is_miss()
        assert not miss.is_ok()
        assert miss.map(str.upper) is miss

    def test_all_misses_equal(self) -> None:
        assert Miss() == Miss()
        assert hash(Miss()) == hash(Miss())


class TestFault:
    def test_reason_and_cause(self) -> None:
        cause = OSError("refused")
        fault = Fault("redis down", cause)
        assert fault.reason == "redis down"
        assert fault.cause is cause
        assert fault.is_fault()

    def test_unwrap_raises_cache_store_error(self) -> None:
        cause = OSError("refused")
        with pytest.raises(CacheStoreError) as info:
            Fault("redis down", cause).unwrap()
        assert info.value.__cause__ is cause

    def test_unwrap_or(self) -> None:
        assert Fault("x").unwrap_or(None) is None

    def test_equality_by_reason(self) -> None:
        assert Fault("x") == Fault("x", OSError())
        assert Fault("x") != Fault("y")


class TestPatternMatching:
    @pytest.mark.parametrize(
        ("outcome", "expected"),
        [
            (Ok("[]"), "ok:[]"),
            (Miss(), "miss"),
            (Fault("timeout"), "fault:timeout"),
        ],
    )
    def test_match(self, outcome: CacheOutcome[str], expected: str) -> None:
        assert _describe(outcome) == expected

    def test_positional_match(self) -> None:
        match Ok("v"):
            case Ok(value):
                assert value == "v"
            case _:
                pytest.fail("Ok did not match positionally")
