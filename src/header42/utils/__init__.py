# topmark:header:start
#
#   project      : header42
#   file         : __init__.py
#   file_relpath : src/header42/utils/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File and diff helpers for the header42 CLI."""
