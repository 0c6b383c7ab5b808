"""Workspace member discovery for bob_the_builder.

Public Interface:
    - resolve_members: Expand member patterns into sorted directories
    - select_contracts: Filter members down to contract packages
"""

from .resolver import expand_pattern
from .resolver import resolve_members
from .selector import CONTRACT_PREFIX
from .selector import select_contracts

__all__ = [
    "CONTRACT_PREFIX",
    "expand_pattern",
    "resolve_members",
    "select_contracts",
]
