"""Module entrypoint for ``python -m nmsearch``.

This keeps module-mode execution behavior identical to the console script.
All argument parsing and host wiring happen in ``nmsearch.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
