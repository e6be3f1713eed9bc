"""Relative import extraction and resolution for JS/TS sources."""

from __future__ import annotations

import posixpath
import re
from collections.abc import Collection, Iterator

from code_health.models import normalize_path

# import x from "./a" | import "./a" | require("./a")
_IMPORT_RE = re.compile(
    r"""import\s+(?:[^'"]+from\s+)?["']([^"']+)["']|require\(["']([^"']+)["']\)"""
)

# Order matters: the first candidate present in the snapshot wins.
RESOLVE_SUFFIXES = (".ts", ".tsx", ".js", ".jsx")
RESOLVE_INDEX_FILES = ("index.ts", "index.tsx", "index.js", "index.jsx")


def extract_specifiers(content: str) -> Iterator[str]:
    """Yield relative module specifiers in source order.

    Package and aliased imports (anything not starting with ``.``) are dropped.
    """
    for m in _IMPORT_RE.finditer(content):
        raw = m.group(1) or m.group(2)
        if not raw:
            continue
        if not raw.startswith("."):
            continue
        yield raw


def resolution_candidates(from_rel: str, raw: str) -> list[str]:
    """Paths tried, in order, when resolving ``raw`` imported from ``from_rel``."""
    from_dir = posixpath.dirname(normalize_path(from_rel))
    raw = normalize_path(raw)
    base = posixpath.normpath(posixpath.join(from_dir, raw))
    # "./lib/" names a directory: only the index candidates can match
    if raw.endswith("/"):
        base += "/"

    candidates = [base]
    candidates.extend(f"{base}{suffix}" for suffix in RESOLVE_SUFFIXES)
    candidates.extend(
        posixpath.normpath(posixpath.join(base, name)) for name in RESOLVE_INDEX_FILES
    )
    return candidates


def resolve_specifier(from_rel: str, raw: str, known: Collection[str]) -> str | None:
    """Map a relative specifier onto one of the known rel paths, or None."""
    for candidate in resolution_candidates(from_rel, raw):
        if candidate in known:
            return candidate
    return None
