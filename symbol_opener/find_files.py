"""Workspace-relative glob search used by the local host."""

import os
import re
from functools import lru_cache
from pathlib import Path

BRACE_RE = re.compile(r"\{([^{}]*)\}")


def expand_braces(pattern: str) -> list[str]:
    """Expand ``{a,b}`` alternatives: ``*.{ts,js}`` -> ``["*.ts", "*.js"]``."""
    match = BRACE_RE.search(pattern)
    if not match:
        return [pattern]
    head, tail = pattern[: match.start()], pattern[match.end() :]
    expanded: list[str] = []
    for option in match.group(1).split(","):
        expanded.extend(expand_braces(head + option + tail))
    return expanded


def _translate(pattern: str) -> str:
    out = []
    i = 0
    n = len(pattern)
    while i < n:
        if pattern.startswith("**/", i):
            out.append("(?:.*/)?")
            i += 3
        elif pattern.startswith("**", i):
            out.append(".*")
            i += 2
        elif pattern[i] == "*":
            out.append("[^/]*")
            i += 1
        elif pattern[i] == "?":
            out.append("[^/]")
            i += 1
        else:
            out.append(re.escape(pattern[i]))
            i += 1
    return "".join(out)


@lru_cache(maxsize=128)
def compile_glob(pattern: str) -> re.Pattern[str]:
    """Compile a glob into a regex matched against a relative POSIX path."""
    alternatives = "|".join(_translate(p) for p in expand_braces(pattern))
    return re.compile(f"(?:{alternatives})")


def glob_matches(pattern: str, rel_path: str) -> bool:
    """Check a relative POSIX path against a glob."""
    return compile_glob(pattern).fullmatch(rel_path) is not None


def find_files(
    root: str | Path,
    include: str,
    exclude: str | None = None,
    max_results: int | None = None,
) -> list[str]:
    """Return absolute paths under ``root`` matching ``include``.

    Directories matching ``exclude`` are not descended into. Results come in
    a stable, sorted walk order.
    """
    root = Path(root)
    results: list[str] = []
    if not root.is_dir():
        return results

    for dirpath, dirnames, filenames in os.walk(root):
        rel_dir = Path(dirpath).relative_to(root).as_posix()
        prefix = "" if rel_dir == "." else rel_dir + "/"
        dirnames.sort()
        if exclude:
            dirnames[:] = [d for d in dirnames if not glob_matches(exclude, f"{prefix}{d}/")]
        for name in sorted(filenames):
            rel_path = prefix + name
            if exclude and glob_matches(exclude, rel_path):
                continue
            if glob_matches(include, rel_path):
                results.append(str(Path(dirpath) / name))
                if max_results is not None and len(results) >= max_results:
                    return results
    return results
