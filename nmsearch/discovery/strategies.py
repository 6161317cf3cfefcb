"""Discovery strategy selection and root-candidate normalization."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from .manifest import find_module_dirs, has_lerna_config
from .packages_dir import list_package_dirs
from .scan import scan_module_dirs

logger = logging.getLogger(__name__)

DISCOVERY_STRATEGIES = ("manifest", "scan", "packages", "auto")
DEFAULT_DISCOVERY = "auto"


def with_root_candidate(candidates: Iterable[str]) -> list[str]:
    """Return ``[""]`` followed by ``candidates`` with duplicates dropped."""
    out = [""]
    seen = {""}
    for candidate in candidates:
        if candidate in seen:
            continue
        seen.add(candidate)
        out.append(candidate)
    return out


def resolve_strategy(root: Path, strategy: str) -> str:
    """Map ``auto`` to a concrete strategy for ``root``."""
    if strategy not in DISCOVERY_STRATEGIES:
        raise ValueError(f"unknown discovery strategy: {strategy!r}")
    if strategy != "auto":
        return strategy
    return "manifest" if has_lerna_config(root) else "scan"


def discover_module_dirs(
    root: Path | str,
    dependency_folder: str,
    strategy: str = DEFAULT_DISCOVERY,
) -> list[str]:
    """Discover module directories under ``root`` with the chosen strategy.

    Every strategy's result starts with the root candidate ``""`` exactly
    once, so all of them feed the package picker the same way.
    """
    root = Path(root)
    concrete = resolve_strategy(root, strategy)
    if concrete == "manifest":
        candidates = find_module_dirs(root)
    elif concrete == "scan":
        candidates = scan_module_dirs(root, dependency_folder)
    else:
        candidates = list_package_dirs(root, dependency_folder)

    result = with_root_candidate(candidates)
    logger.debug("discovery (%s) for %s: %s", concrete, root, result)
    return result


__all__ = [
    "DISCOVERY_STRATEGIES",
    "DEFAULT_DISCOVERY",
    "with_root_candidate",
    "resolve_strategy",
    "discover_module_dirs",
]
