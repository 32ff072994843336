# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""PathStore exceptions.

Every error carries the offending dotted path in its ``path`` attribute.
"""

from __future__ import annotations


class PathStoreError(Exception):
    """Base exception for PathStore errors."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(message)


class InvalidPropertyError(PathStoreError, ValueError):
    """Raised when a value being written is not made of scalar leaves."""

    def __init__(self, path: str) -> None:
        super().__init__(path, f"Property must be scalar: {path}")


class PropertyNotExistError(PathStoreError, KeyError):
    """Raised when a path does not resolve to an existing entry."""

    def __init__(self, path: str) -> None:
        super().__init__(path, f"Property does not exist at key: {path}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class PropertyOverrideError(PathStoreError):
    """Raised when a protected write hits an existing key."""

    def __init__(self, path: str) -> None:
        super().__init__(path, f"Property already exists at key: {path}")
