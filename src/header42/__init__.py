# topmark:header:start
#
#   project      : header42
#   file         : __init__.py
#   file_relpath : src/header42/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""header42 package.

header42 maintains the fixed-width "42 header" comment block at the top of
source files. It inserts the header on demand, refreshes the ``Updated:`` line
on subsequent runs and preserves the original ``Created:`` metadata. It exposes
a CLI and a small pure API (see `header42.core`).
"""

from __future__ import annotations
