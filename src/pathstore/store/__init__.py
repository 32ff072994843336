# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""PathStore package - Dot-path addressable data container.

The package is organized into:
- core: Main PathStore class with path traversal, access, and iteration
- loading: Conversion of nested mappings into nodes and scalar checks

Example:
    >>> from pathstore import PathStore
    >>> store = PathStore().set_item('config.name', 'MyApp')
    >>> store['config.name']
    'MyApp'
"""

from .core import PathStore

__all__ = ["PathStore"]
