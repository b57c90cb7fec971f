# topmark:header:start
#
#   project      : header42
#   file         : __init__.py
#   file_relpath : src/header42/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line interface for header42."""
