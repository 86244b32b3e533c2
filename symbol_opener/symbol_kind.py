"""Kind vocabulary shared with the symbol index.

Kind codes follow the LSP ``SymbolKind`` numbering shifted to start at zero,
which is the numbering editor hosts expose to extensions. Snapshots in the
LSP wire format are 1-based and are shifted when parsed.
"""

from collections.abc import Iterable
from enum import IntEnum

from symbol_opener.errors import InvalidKindNameError, UnknownKindError


class SymbolKind(IntEnum):
    """Syntactic category of a symbol as reported by the index."""

    File = 0
    Module = 1
    Namespace = 2
    Package = 3
    Class = 4
    Method = 5
    Property = 6
    Field = 7
    Constructor = 8
    Enum = 9
    Interface = 10
    Function = 11
    Variable = 12
    Constant = 13
    String = 14
    Number = 15
    Boolean = 16
    Array = 17
    Object = 18
    Key = 19
    Null = 20
    EnumMember = 21
    Struct = 22
    Event = 23
    Operator = 24
    TypeParameter = 25


# Ecosystems disagree on whether callables on a type are functions or methods.
CALLABLE_KINDS = frozenset(
    {SymbolKind.Function, SymbolKind.Method, SymbolKind.Constructor}
)


def kind_code_of(name: str) -> SymbolKind:
    """Return the kind code for a human-readable kind name."""
    try:
        return SymbolKind[name]
    except KeyError:
        raise UnknownKindError(name) from None


def build_priority_map(ordered_names: Iterable[str]) -> dict[SymbolKind, int]:
    """Map kind codes to their rank in ``ordered_names``.

    Raises ``InvalidKindNameError`` on the first name outside the vocabulary.
    A repeated name keeps its first rank.
    """
    priority: dict[SymbolKind, int] = {}
    for name in ordered_names:
        if name not in SymbolKind.__members__:
            raise InvalidKindNameError(name)
        priority.setdefault(SymbolKind[name], len(priority))
    return priority


def kind_filter_codes(kind_hint: str) -> frozenset[SymbolKind]:
    """Return the set of kind codes that satisfy a kind hint.

    ``Function`` also admits ``Method`` and ``Constructor``; every other hint
    admits only its own kind.
    """
    kind = kind_code_of(kind_hint)
    if kind is SymbolKind.Function:
        return CALLABLE_KINDS
    return frozenset({kind})


def matches_kind_hint(kind: int, kind_hint: str | None) -> bool:
    """Check whether a candidate kind passes an optional kind hint."""
    if not kind_hint:
        return True
    return kind in kind_filter_codes(kind_hint)
