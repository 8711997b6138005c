"""Allow running the converter with ``python -m figma2xliff``."""

from .cli import cli

if __name__ == "__main__":
    cli()
