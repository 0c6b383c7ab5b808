"""Selection of contract packages among workspace members."""

import logging
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)

CONTRACT_PREFIX = "contracts/"


def is_contract(path: Path, prefix: str = CONTRACT_PREFIX) -> bool:
    """Check whether a member path lies under the contract prefix.

    The test is a literal prefix match on the path as written, using
    forward slashes on every platform.
    """
    return path.as_posix().startswith(prefix)


def select_contracts(members: Sequence[Path], prefix: str = CONTRACT_PREFIX) -> list[Path]:
    """Keep only the members under the contract prefix, preserving order."""
    contracts = [member for member in members if is_contract(member, prefix)]
    logger.info(f"Contracts to be built: {[str(c) for c in contracts]}")
    return contracts
