"""Module entrypoint for ``python -m lazytree``.

This keeps module-mode execution behavior identical to the console script.
All argument parsing and dispatch happen in ``lazytree.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
