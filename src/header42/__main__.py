# topmark:header:start
#
#   project      : header42
#   file         : __main__.py
#   file_relpath : src/header42/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Entry point for ``python -m header42``."""

from header42.cli.main import cli

if __name__ == "__main__":
    cli()
