"""Manifest-driven module-directory discovery for lerna-style monorepos."""

from __future__ import annotations

import glob
import json
import logging
import os
from pathlib import Path

from ..errors import ManifestParseError
from ..paths import relative_to_root

logger = logging.getLogger(__name__)

LERNA_CONFIG_FILE = "lerna.json"
MANIFEST_FILE = "package.json"
RECURSIVE_WILDCARD = "**"


def has_lerna_config(root: Path) -> bool:
    """Return whether ``root`` carries a monorepo manifest."""
    return (root / LERNA_CONFIG_FILE).is_file()


def read_package_patterns(root: Path) -> list[str]:
    """Read the ``packages`` glob list from ``root/lerna.json``.

    A missing ``packages`` key means no patterns. Malformed JSON or a
    ``packages`` value that is not a list of strings raises
    ``ManifestParseError``.
    """
    config_path = root / LERNA_CONFIG_FILE
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ManifestParseError(config_path, str(exc)) from exc
    if not isinstance(data, dict):
        raise ManifestParseError(config_path, "top-level value must be an object")

    patterns = data.get("packages")
    if patterns is None:
        return []
    if not isinstance(patterns, list) or not all(isinstance(pattern, str) for pattern in patterns):
        raise ManifestParseError(config_path, '"packages" must be a list of glob patterns')
    return list(patterns)


def expand_package_pattern(root: Path, pattern: str) -> list[str]:
    """Return package directories matched by one ``packages`` pattern.

    Patterns using ``**`` are not supported and match nothing.
    """
    if RECURSIVE_WILDCARD in pattern:
        logger.debug("ignoring recursive package pattern %r", pattern)
        return []
    manifest_glob = os.path.join(glob.escape(os.fspath(root)), pattern, MANIFEST_FILE)
    return [relative_to_root(root, os.path.dirname(match)) for match in sorted(glob.glob(manifest_glob))]


def find_module_dirs(root: Path | str) -> list[str]:
    """List candidate module directories declared by ``root/lerna.json``.

    The result always starts with ``""`` (the workspace root) followed by each
    matched package directory, patterns in declaration order. Without a
    manifest the result is ``[""]``.
    """
    root = Path(root)
    if not has_lerna_config(root):
        return [""]

    found = [""]
    seen = {""}
    for pattern in read_package_patterns(root):
        for relative in expand_package_pattern(root, pattern):
            if relative in seen:
                continue
            seen.add(relative)
            found.append(relative)
    logger.debug("lerna packages under %s: %s", root, found[1:])
    return found


__all__ = [
    "LERNA_CONFIG_FILE",
    "MANIFEST_FILE",
    "RECURSIVE_WILDCARD",
    "has_lerna_config",
    "read_package_patterns",
    "expand_package_pattern",
    "find_module_dirs",
]
