"""Package version extraction.

The version lives in the Go source as ``version := "X.Y.Z"``. It is scraped
textually; the file is never compiled or executed.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from .result import Err, Ok, Result

__all__ = ["VersionNotFound", "parse_version", "resolve_version"]

_VERSION_RE = re.compile(r'\bversion[ \t]*:=[ \t]*"([^"\n]*)"')


@dataclass(frozen=True, slots=True)
class VersionNotFound:
    """No ``version := "..."`` assignment could be found."""

    source: Path | None = None
    reason: str = 'no `version := "..."` declaration'

    def __str__(self) -> str:
        if self.source is None:
            return self.reason
        return f"{self.source}: {self.reason}"


def parse_version(text: str, *, source: Path | None = None) -> Result[str, VersionNotFound]:
    """Return the value of the first ``version := "X"`` in ``text``."""
    match = _VERSION_RE.search(text)
    if match is None:
        return Err(VersionNotFound(source=source))
    return Ok(match.group(1))


def resolve_version(path: Path) -> Result[str, VersionNotFound]:
    """Read ``path`` and extract the declared version."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return Err(VersionNotFound(source=path, reason="version file not found"))
    except (OSError, UnicodeDecodeError) as e:
        return Err(VersionNotFound(source=path, reason=f"cannot read version file: {e}"))
    return parse_version(text, source=path)
