"""Public package surface for nmsearch.

Exports ``main`` for programmatic CLI invocation.
Discovery, selection, and browsing live in submodules under ``nmsearch``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = ["main"]
