"""Normalization of index-decorated symbol names."""

CALL_SUFFIX = "()"


def normalize_symbol_name(raw_name: str) -> str:
    """Strip index decorations from a raw symbol name.

    TypeScript appends ``()`` to callables: ``createHandler()`` -> ``createHandler``.
    Go qualifies methods with their receiver: ``Linker.buildSymbolPattern`` ->
    ``buildSymbolPattern``.
    """
    name = raw_name
    if name.endswith(CALL_SUFFIX):
        name = name[: -len(CALL_SUFFIX)]
    _, dot, tail = name.rpartition(".")
    if dot:
        name = tail
    return name


def is_exact_match(raw_name: str, query_name: str) -> bool:
    """Case-sensitive equality of the normalized candidate name and the query."""
    return normalize_symbol_name(raw_name) == query_name
