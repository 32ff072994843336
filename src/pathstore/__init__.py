# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""PathStore - Nested configuration data addressed by dotted paths.

A lightweight, zero-dependency library holding a tree of ordered maps
with scalar leaves, read and written through paths like 'app.db.host'.
"""

__version__ = "0.1.0"

from .exceptions import (
    InvalidPropertyError,
    PathStoreError,
    PropertyNotExistError,
    PropertyOverrideError,
)
from .interfaces import Exporter, Importer
from .node import PathStoreNode
from .policy import SEPARATOR, Policy, tokenize
from .store import PathStore

__all__ = [
    # Core classes
    "PathStore",
    "PathStoreNode",
    "Policy",
    "SEPARATOR",
    "tokenize",
    # Collaborators
    "Importer",
    "Exporter",
    # Exceptions
    "PathStoreError",
    "InvalidPropertyError",
    "PropertyNotExistError",
    "PropertyOverrideError",
]
