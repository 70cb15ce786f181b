"""sha2vault CLI entry point.

Kept minimal so that ``python -m sha2vault`` and the ``sha2vault``
console-script entry point both resolve here.
"""

from __future__ import annotations

from sha2vault.cli import cli


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
