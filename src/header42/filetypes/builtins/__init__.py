# topmark:header:start
#
#   project      : header42
#   file         : __init__.py
#   file_relpath : src/header42/filetypes/builtins/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in FileType groups for header42.

Each submodule exports a ``FILETYPES`` list of
[`header42.filetypes.base.FileType`][] instances, grouped by comment family.
The aggregator in ``instances.py`` concatenates these lists to build the
runtime registry.
"""

from __future__ import annotations
