# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""PathStore node class."""

from __future__ import annotations

from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from .store import PathStore


class PathStoreNode:
    """A node in a PathStore hierarchy.

    A node is either a branch or a leaf:
    - branch: value is a PathStore owning the children
    - leaf: value is a scalar, or a sequence of scalars

    Each node has:
    - label: The node's unique key within its parent
    - value: The leaf value or the child PathStore
    - parent: Reference to the containing PathStore

    Example:
        >>> node = PathStoreNode('host', 'localhost')
        >>> node.label
        'host'
        >>> node.is_leaf
        True
    """

    __slots__ = ('label', 'value', 'parent')

    def __init__(
        self,
        label: str,
        value: Any = None,
        parent: PathStore | None = None,
    ) -> None:
        self.label = label
        self.value = value
        self.parent = parent

    def __repr__(self) -> str:
        value_repr = (
            f"PathStore({len(self.value)})"
            if self.is_branch
            else repr(self.value)
        )
        return f"PathStoreNode({self.label!r}, value={value_repr})"

    @property
    def is_branch(self) -> bool:
        """True if this node contains a PathStore (has children)."""
        from .store import PathStore
        return isinstance(self.value, PathStore)

    @property
    def is_leaf(self) -> bool:
        """True if this node contains a scalar or sequence value."""
        return not self.is_branch
