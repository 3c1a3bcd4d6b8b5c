"""Release matrix: one binary per supported platform.

Platforms are built one after another in declaration order so logs diff
cleanly between runs. The first failure ends the run; binaries already built
stay in the build directory.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from ob.core.result import Err, Ok, Result
from ob.platform.detection import Target

from .build_errors import BuildError

__all__ = ["RELEASE_PLATFORMS", "ReleaseMatrix"]

RELEASE_PLATFORMS: tuple[Target, ...] = (
    Target("linux", "amd64"),
    Target("linux", "arm64"),
    Target("darwin", "amd64"),
    Target("windows", "amd64"),
)


class ReleaseMatrix:
    def __init__(self, platforms: Sequence[Target] = RELEASE_PLATFORMS) -> None:
        self._platforms = tuple(platforms)

    def run(
        self,
        build_one: Callable[[Target], Result[str, BuildError]],
    ) -> Result[list[str], BuildError]:
        """Build every platform in order, stopping at the first error.

        Returns:
            Ok(paths) with one artifact path per platform, or the first Err.
        """
        built: list[str] = []
        for target in self._platforms:
            result = build_one(target)
            if isinstance(result, Err):
                return result
            built.append(result.value)
        return Ok(built)
