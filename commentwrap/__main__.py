"""Module entrypoint for ``python -m commentwrap``.

All argument parsing happens in ``commentwrap.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
