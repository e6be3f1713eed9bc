"""Abstract base rule."""

from __future__ import annotations

import abc
import re

from code_health.models import Issue, RuleContext, ScannedFile

_JSX_FILE_RE = re.compile(r"\.(t|j)sx$")


class Rule(abc.ABC):
    """A single check run over the whole file snapshot.

    ``run`` is async so callers may schedule rules together; rules never
    mutate the snapshot and share no state.
    """

    id: str
    title: str

    @abc.abstractmethod
    async def run(self, ctx: RuleContext, files: list[ScannedFile]) -> list[Issue]:
        """Inspect the snapshot and return the issues found."""


def is_jsx_file(f: ScannedFile) -> bool:
    return bool(_JSX_FILE_RE.search(f.rel_path))


def line_of_offset(content: str, offset: int) -> int:
    """1-based line number of a character offset."""
    return content.count("\n", 0, offset) + 1
