"""Command-line interface entry point."""

import sys

from cyclopts import App

from .checker import check

app = App(name="toggled")
app.default(check)


def main(argv: list[str] | None = None) -> int:
    """Run the toggled CLI."""
    argv = sys.argv[1:] if argv is None else argv
    return app(argv)


if __name__ == "__main__":
    raise SystemExit(main())
