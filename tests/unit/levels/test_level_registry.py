"""Unit tests for the level registry."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from logtree.errors import InvalidLevelTypeError, LevelError, UnknownLevelError
from logtree.levels import (
    CANONICAL_LEVELS,
    CRITICAL,
    DEBUG,
    ERROR,
    FATAL,
    INFO,
    NOTSET,
    WARN,
    WARNING,
    LevelRegistry,
)


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------


class TestConstants:
    def test_reserved_values(self) -> None:
        assert (NOTSET, DEBUG, INFO, WARNING, ERROR, CRITICAL) == (0, 10, 20, 30, 40, 50)

    def test_synonyms(self) -> None:
        assert FATAL == CRITICAL
        assert WARN == WARNING


# ---------------------------------------------------------------------------
# name_of / number_of
# ---------------------------------------------------------------------------


class TestLookups:
    @pytest.mark.parametrize("level,name", sorted(CANONICAL_LEVELS.items()))
    def test_canonical_round_trip(self, level: int, name: str) -> None:
        registry = LevelRegistry()
        assert registry.name_of(level) == name
        assert registry.number_of(name) == level

    def test_synonym_constants_resolve_to_canonical_names(self) -> None:
        registry = LevelRegistry()
        assert registry.name_of(FATAL) == "CRITICAL"
        assert registry.name_of(WARN) == "WARNING"

    def test_synonym_names_are_not_registered(self) -> None:
        registry = LevelRegistry()
        assert registry.number_of("FATAL") == "Level FATAL"
        assert registry.number_of("WARN") == "Level WARN"

    def test_unknown_number(self) -> None:
        assert LevelRegistry().name_of(35) == "Level 35"

    def test_unknown_name(self) -> None:
        assert LevelRegistry().number_of("VERBOSE") == "Level VERBOSE"

    def test_get_level_name_is_polymorphic(self) -> None:
        registry = LevelRegistry()
        assert registry.get_level_name(ERROR) == "ERROR"
        assert registry.get_level_name("ERROR") == ERROR
        assert registry.get_level_name(99) == "Level 99"
        assert registry.get_level_name("NOPE") == "Level NOPE"

    def test_contains(self) -> None:
        registry = LevelRegistry()
        assert INFO in registry
        assert "INFO" in registry
        assert 11 not in registry


# ---------------------------------------------------------------------------
# register
# ---------------------------------------------------------------------------


class TestRegister:
    def test_register_new_pair(self) -> None:
        registry = LevelRegistry()
        registry.register(80, "FOOBAR")
        assert registry.name_of(80) == "FOOBAR"
        assert registry.number_of("FOOBAR") == 80

    def test_register_is_idempotent(self) -> None:
        registry = LevelRegistry()
        registry.register(25, "NOTICE")
        registry.register(25, "NOTICE")
        assert registry.name_of(25) == "NOTICE"
        assert registry.number_of("NOTICE") == 25

    def test_rebinding_a_number_keeps_the_stale_name(self) -> None:
        registry = LevelRegistry()
        registry.register(ERROR, "BAD")
        assert registry.name_of(ERROR) == "BAD"
        assert registry.number_of("BAD") == ERROR
        # the old name still resolves in the name -> number direction
        assert registry.number_of("ERROR") == ERROR

    def test_rebinding_a_name_keeps_the_stale_number(self) -> None:
        registry = LevelRegistry()
        registry.register(45, "ERROR")
        assert registry.number_of("ERROR") == 45
        assert registry.name_of(45) == "ERROR"
        assert registry.name_of(ERROR) == "ERROR"

    def test_registries_are_isolated(self) -> None:
        a, b = LevelRegistry(), LevelRegistry()
        a.register(15, "TRACE")
        assert b.name_of(15) == "Level 15"

    def test_names_mapping_is_a_copy(self) -> None:
        registry = LevelRegistry()
        mapping = registry.names_mapping()
        mapping["HACK"] = 1
        assert registry.number_of("HACK") == "Level HACK"
        assert mapping["INFO"] == INFO


# ---------------------------------------------------------------------------
# validate
# ---------------------------------------------------------------------------


class TestValidate:
    def test_number_passes_through(self) -> None:
        assert LevelRegistry().validate(33) == 33

    def test_name_is_converted(self) -> None:
        assert LevelRegistry().validate("DEBUG") == DEBUG

    def test_registered_name_is_converted(self) -> None:
        registry = LevelRegistry()
        registry.register(5, "TRACE")
        assert registry.validate("TRACE") == 5

    def test_unknown_name_raises(self) -> None:
        with pytest.raises(UnknownLevelError) as exc_info:
            LevelRegistry().validate("LOUD")
        assert exc_info.value.level == "LOUD"
        assert isinstance(exc_info.value, ValueError)
        assert isinstance(exc_info.value, LevelError)

    @pytest.mark.parametrize("bad", [1.5, None, [10], object()])
    def test_wrong_type_raises(self, bad: object) -> None:
        with pytest.raises(InvalidLevelTypeError):
            LevelRegistry().validate(bad)  # type: ignore[arg-type]

    def test_wrong_type_is_a_type_error(self) -> None:
        with pytest.raises(TypeError):
            LevelRegistry().validate(2.0)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------

_unreserved = st.integers(min_value=0, max_value=10_000).filter(lambda n: n not in CANONICAL_LEVELS)
_level_names = st.text(alphabet="ABCDEFGHIJKLMNOPQRSTUVWXYZ_", min_size=1, max_size=12)


class TestRegistryProperties:
    @given(level=_unreserved)
    def test_unregistered_numbers_get_synthetic_name(self, level: int) -> None:
        assert LevelRegistry().name_of(level) == f"Level {level}"

    @given(level=st.integers(min_value=0, max_value=10_000), name=_level_names)
    def test_registered_pairs_resolve_both_ways(self, level: int, name: str) -> None:
        registry = LevelRegistry()
        registry.register(level, name)
        assert registry.name_of(level) == name
        assert registry.number_of(name) == level
        assert registry.validate(name) == level
