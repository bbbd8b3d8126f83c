"""Module entrypoint for ``python -m termsurvey``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and session setup happen in ``termsurvey.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
