"""Tests for the kind vocabulary."""

import pytest

from symbol_opener.errors import InvalidKindNameError, UnknownKindError
from symbol_opener.symbol_kind import (
    SymbolKind,
    build_priority_map,
    kind_code_of,
    kind_filter_codes,
    matches_kind_hint,
)

VOCABULARY = [
    "File", "Module", "Namespace", "Package", "Class", "Method", "Property",
    "Field", "Constructor", "Enum", "Interface", "Function", "Variable",
    "Constant", "String", "Number", "Boolean", "Array", "Object", "Key", "Null",
    "EnumMember", "Struct", "Event", "Operator", "TypeParameter",
]  # fmt: skip


def test_kind_code_of_is_a_bijection() -> None:
    """Every vocabulary name maps to a distinct code, in host numbering."""
    codes = [kind_code_of(name) for name in VOCABULARY]
    assert codes == list(range(len(VOCABULARY)))
    assert {c.name for c in codes} == set(VOCABULARY)


@pytest.mark.parametrize("name", ["function", "Func", "", "Class ", "Unknown"])
def test_kind_code_of_rejects_unknown_names(name: str) -> None:
    """Lookup is exact and case-sensitive."""
    with pytest.raises(UnknownKindError):
        kind_code_of(name)


def test_unknown_kind_is_an_invalid_kind_name() -> None:
    """Callers catching InvalidKindNameError also see lookup failures."""
    with pytest.raises(InvalidKindNameError):
        kind_code_of("Nope")


def test_build_priority_map_ranks_in_order() -> None:
    """Earlier names rank before later names."""
    priority = build_priority_map(["Class", "Function", "Variable"])
    assert priority == {
        SymbolKind.Class: 0,
        SymbolKind.Function: 1,
        SymbolKind.Variable: 2,
    }


def test_build_priority_map_keeps_first_rank_of_duplicates() -> None:
    """A repeated name does not move or create a gap."""
    priority = build_priority_map(["Class", "Class", "Method"])
    assert priority == {SymbolKind.Class: 0, SymbolKind.Method: 1}


def test_build_priority_map_fails_on_typo() -> None:
    """A misspelled kind is reported, not dropped."""
    with pytest.raises(InvalidKindNameError) as excinfo:
        build_priority_map(["Class", "Fuction"])
    assert excinfo.value.name == "Fuction"
    assert "Fuction" in str(excinfo.value)


def test_function_hint_admits_methods_and_constructors() -> None:
    """Function broadens to Method and Constructor, not to other kinds."""
    assert matches_kind_hint(SymbolKind.Method, "Function")
    assert matches_kind_hint(SymbolKind.Constructor, "Function")
    assert matches_kind_hint(SymbolKind.Function, "Function")
    assert not matches_kind_hint(SymbolKind.Variable, "Function")


def test_broadening_is_one_directional() -> None:
    """A Method hint does not admit functions."""
    assert kind_filter_codes("Method") == frozenset({SymbolKind.Method})
    assert not matches_kind_hint(SymbolKind.Function, "Method")


def test_no_hint_matches_everything() -> None:
    """Without a hint every kind passes."""
    assert matches_kind_hint(SymbolKind.Variable, None)
