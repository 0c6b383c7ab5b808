"""Workspace member resolution.

Expands the member glob patterns of a root manifest into the sorted list
of package directories they name.

Contract:
- Inputs: Ordered glob patterns, project directory
- Outputs: Sorted project-relative directory paths
- Side Effects: None (read-only filesystem access)
"""

import glob
import logging
from collections.abc import Iterable
from pathlib import Path

from ..errors import GlobExpansionError

logger = logging.getLogger(__name__)


def _validate_pattern(pattern: str) -> None:
    """Reject patterns that the glob engine would silently misread.

    Raises:
        GlobExpansionError: If the pattern is malformed
    """
    if not pattern:
        raise GlobExpansionError(pattern, "pattern is empty")

    for component in pattern.replace("\\", "/").split("/"):
        if "**" in component and component != "**":
            raise GlobExpansionError(pattern, "recursive wildcards must form a single path component")

    i = 0
    while i < len(pattern):
        if pattern[i] == "[":
            # A ']' right after '[' or '[!' is part of the class
            j = i + 1
            if j < len(pattern) and pattern[j] == "!":
                j += 1
            if j < len(pattern) and pattern[j] == "]":
                j += 1
            close = pattern.find("]", j)
            if close == -1:
                raise GlobExpansionError(pattern, "unterminated character class")
            i = close
        i += 1


def is_project_dir(path: Path) -> bool:
    """Check whether a glob match is a candidate project.

    This filters matches of a member like `contracts/*` down to
    directories. Whether the directory holds a manifest is checked later,
    when the package is opened for building.
    """
    return path.is_dir()


def expand_pattern(pattern: str, project_dir: Path | str = ".") -> list[Path]:
    """Expand one member pattern relative to the project directory.

    Args:
        pattern: Glob pattern, `**` allowed as a whole path component
        project_dir: Directory the pattern is relative to

    Returns:
        Matching paths relative to project_dir, in engine order.
        A pattern matching nothing yields an empty list.

    Raises:
        GlobExpansionError: If the pattern is malformed or a directory
            cannot be read
    """
    _validate_pattern(pattern)

    try:
        matches = glob.glob(pattern, root_dir=project_dir, recursive=True, include_hidden=True)
    except OSError as e:
        raise GlobExpansionError(pattern, str(e)) from e

    return [Path(match) for match in matches]


def resolve_members(patterns: Iterable[str], project_dir: Path | str = ".") -> list[Path]:
    """Resolve workspace member patterns into sorted package directories.

    Each pattern is expanded independently and its non-directory matches
    are dropped. The combined list is then sorted so build order does not
    depend on filesystem iteration order. Duplicates matched by more than
    one pattern are kept.

    Args:
        patterns: Member glob patterns in declaration order
        project_dir: Directory the patterns are relative to

    Returns:
        Sorted project-relative directory paths

    Raises:
        GlobExpansionError: If any pattern cannot be expanded
    """
    root = Path(project_dir)
    packages: list[Path] = []

    for pattern in patterns:
        matches = expand_pattern(pattern, root)
        packages.extend(path for path in matches if is_project_dir(root / path))

    packages.sort()

    logger.info(f"Package directories: {[str(p) for p in packages]}")
    return packages
