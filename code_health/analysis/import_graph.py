"""Import graph builder, cycle detection and import line lookup."""

from __future__ import annotations

import enum
import logging
import posixpath
import re
from collections.abc import Iterable, Mapping, Sequence

from code_health.analysis.imports import extract_specifiers, resolve_specifier
from code_health.models import ScannedFile, normalize_path

logger = logging.getLogger(__name__)

ImportGraph = dict[str, set[str]]

_SOURCE_EXT_RE = re.compile(r"\.(tsx?|jsx?)$", re.IGNORECASE)


class _Mark(enum.Enum):
    ON_STACK = "on_stack"
    DONE = "done"


def build_import_graph(files: Iterable[ScannedFile]) -> ImportGraph:
    """Build ``{rel_path: {rel_paths it imports}}`` for a file snapshot.

    Every file becomes a node, including files without imports. Imports
    that do not resolve to a file of the snapshot produce no edge.
    """
    files = list(files)
    known = {f.key for f in files}
    graph: ImportGraph = {}

    for f in files:
        deps: set[str] = set()
        for raw in extract_specifiers(f.content):
            resolved = resolve_specifier(f.rel_path, raw, known)
            if resolved is not None:
                deps.add(resolved)
        graph[f.key] = deps

    logger.debug(
        "import graph: %d nodes, %d edges",
        len(graph), sum(len(deps) for deps in graph.values()),
    )
    return graph


def find_cycles(graph: Mapping[str, Iterable[str]]) -> list[list[str]]:
    """Enumerate cycles with a depth-first walk, one per back-edge.

    Each cycle is returned closed, e.g. ``[a, b, a]``; a self import is
    ``[a, a]``. Nodes are entered in graph order and neighbors in sorted
    order, so the result is stable for a given graph. Neighbors that are
    not nodes of the graph are ignored.
    """
    marks: dict[str, _Mark] = {}
    cycles: list[list[str]] = []

    for root in graph:
        if root in marks:
            continue

        path = [root]
        position = {root: 0}
        marks[root] = _Mark.ON_STACK
        pending = [iter(sorted(graph[root]))]

        while pending:
            for neighbor in pending[-1]:
                if neighbor not in graph:
                    continue
                mark = marks.get(neighbor)
                if mark is _Mark.ON_STACK:
                    cycles.append(path[position[neighbor]:] + [neighbor])
                elif mark is None:
                    marks[neighbor] = _Mark.ON_STACK
                    position[neighbor] = len(path)
                    path.append(neighbor)
                    pending.append(iter(sorted(graph[neighbor])))
                    break
            else:
                pending.pop()
                finished = path.pop()
                del position[finished]
                marks[finished] = _Mark.DONE

    return cycles


def import_specifiers_for(from_rel: str, to_rel: str) -> list[str]:
    """Specifiers that would have produced the edge ``from_rel -> to_rel``.

    The extensionless form comes first, e.g. ``["./b", "./b.ts"]``.
    """
    from_dir = posixpath.dirname(normalize_path(from_rel)) or "."
    rel = normalize_path(posixpath.relpath(normalize_path(to_rel), from_dir))
    with_dot = rel if rel.startswith(".") else f"./{rel}"
    without_ext = _SOURCE_EXT_RE.sub("", with_dot)
    return [without_ext, with_dot]


def find_import_line(from_rel: str, to_rel: str, lines: Sequence[str]) -> int | None:
    """Return the 1-based line in ``from_rel`` that imports ``to_rel``."""
    patterns = []
    for spec in import_specifiers_for(from_rel, to_rel):
        esc = re.escape(spec)
        patterns.append(re.compile(rf"""\bfrom\s+['"]{esc}['"]"""))
        patterns.append(re.compile(rf"""\brequire\(\s*['"]{esc}['"]\s*\)"""))

    for idx, line in enumerate(lines):
        if any(p.search(line) for p in patterns):
            return idx + 1
    return None
