"""Module-directory discovery for single-package and monorepo workspaces.

This package contains pure ``root -> [relative dir]`` helpers:
- manifest-driven expansion of ``lerna.json`` package globs
- recursive scan for manifest + dependency-folder pairs with pruning
- ``packages/<name>`` listing for conventional monorepo layouts
- strategy selection with a uniform root-candidate convention
"""

from __future__ import annotations

from .manifest import (
    LERNA_CONFIG_FILE,
    MANIFEST_FILE,
    expand_package_pattern,
    find_module_dirs,
    has_lerna_config,
    read_package_patterns,
)
from .packages_dir import PACKAGES_DIR, list_package_dirs
from .scan import DEFAULT_SCAN_WORKERS, DirectoryScan, scan_directory, scan_module_dirs
from .strategies import (
    DEFAULT_DISCOVERY,
    DISCOVERY_STRATEGIES,
    discover_module_dirs,
    resolve_strategy,
    with_root_candidate,
)

__all__ = [
    "LERNA_CONFIG_FILE",
    "MANIFEST_FILE",
    "PACKAGES_DIR",
    "DEFAULT_SCAN_WORKERS",
    "DEFAULT_DISCOVERY",
    "DISCOVERY_STRATEGIES",
    "DirectoryScan",
    "has_lerna_config",
    "read_package_patterns",
    "expand_package_pattern",
    "find_module_dirs",
    "scan_directory",
    "scan_module_dirs",
    "list_package_dirs",
    "with_root_candidate",
    "resolve_strategy",
    "discover_module_dirs",
]
