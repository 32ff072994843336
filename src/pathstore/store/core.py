# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""PathStore - A dot-path addressable hierarchical key/value container.

This module provides the PathStore class, the container holding nested
configuration-like data: a tree of ordered branches whose leaves are
scalars (or sequences of scalars).

Key Features:
    - **Path navigation**: Dotted paths ('a.b.c') for read, write and delete
    - **Autocreate**: Writes create missing intermediate branches
    - **Write policies**: Override, protect silently, or raise on collision
    - **Scalar leaves**: Values are checked to be scalar-only before writing
    - **Import/Export**: Load from and hand off to external collaborators

Ownership:
    The store owns its tree. Mappings given at construction, on import or
    on write are copied into nodes; reads and exports return plain copies.
    Mutating a returned dict never changes the store, and vice versa.

Example:
    Basic usage::

        store = PathStore({'app': {'name': 'demo'}})
        store.set_item('app.database.host', 'localhost')
        store['app.database.port'] = 5432

        print(store['app.database.host'])  # 'localhost'
        print(store.as_dict())
        # {'app': {'name': 'demo', 'database': {'host': 'localhost', 'port': 5432}}}

    Protected writes::

        store.set_item('app.name', 'other', Policy.PROTECT_SILENT)
        store['app.name']  # 'demo'
"""

from __future__ import annotations

import json
import logging
from typing import Any, Iterator, Mapping

from ..exceptions import PropertyNotExistError, PropertyOverrideError
from ..interfaces import Exporter, Importer
from ..node import PathStoreNode
from ..policy import Policy, tokenize
from .loading import check_scalar_leaves, copy_value, load_from_mapping, make_node

logger = logging.getLogger(__name__)


class PathStore:
    """A hierarchical data container addressed by dotted paths.

    PathStore provides:
    - set_item(path, value, policy): Write with autocreate of intermediates
    - get_item(path, default) / store[path]: Read values
    - del_item(path) / del store[path]: Remove values
    - exists(path): Full path existence
    - label in store: Top-level key existence only
    - import_from(source) / export(sink): Bulk load and hand off

    Attributes:
        raise_on_missing: If True (default), reading a missing path raises
            PropertyNotExistError. If False, get_item returns its default.

    Example:
        >>> store = PathStore().set_item('db.host', 'localhost').set_item('db.port', 5432)
        >>> store['db']
        {'host': 'localhost', 'port': 5432}
    """

    __slots__ = ('_nodes', 'raise_on_missing')

    def __init__(
        self,
        source: Mapping[str, Any] | Importer | None = None,
        raise_on_missing: bool = True,
    ) -> None:
        """Initialize a PathStore.

        Args:
            source: Optional initial data. Can be:
                - Mapping: nested mapping, copied into the store
                  (no scalar check is applied to the initial load)
                - Importer: its to_dict() result is loaded
            raise_on_missing: Whether get_item raises on a missing path
                or returns the default.

        Example:
            >>> PathStore({'a': 1, 'b': {'c': 2}})
            PathStore(['a', 'b'])
            >>> PathStore(raise_on_missing=False).get_item('x.y', 'fallback')
            'fallback'
        """
        self._nodes: dict[str, PathStoreNode] = {}
        self.raise_on_missing = raise_on_missing

        if source is not None:
            load_from_mapping(self, self._resolve_source(source))

    @staticmethod
    def _resolve_source(source: Mapping[str, Any] | Importer) -> Mapping[str, Any]:
        """Return the mapping behind a source.

        Raises:
            TypeError: If source is neither a Mapping nor an Importer.
        """
        if isinstance(source, Mapping):
            return source
        if isinstance(source, Importer):
            logger.debug("Importing from %s", type(source).__name__)
            return source.to_dict()
        raise TypeError(
            f"source must be a Mapping or an Importer, not {type(source).__name__}"
        )

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"PathStore({list(self._nodes.keys())})"

    def __len__(self) -> int:
        """Return the number of top-level keys."""
        return len(self._nodes)

    def __iter__(self) -> Iterator[tuple[str, Any]]:
        """Iterate over top-level (key, value) pairs in insertion order."""
        return self.iter_items()

    def __contains__(self, label: str) -> bool:
        """Check a top-level key only. Use exists() for dotted paths."""
        return label in self._nodes

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PathStore):
            return self.as_dict() == other.as_dict()
        if isinstance(other, Mapping):
            return self.as_dict() == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __getitem__(self, path: str) -> Any:
        return self.get_item(path)

    def __setitem__(self, path: str, value: Any) -> None:
        self.set_item(path, value)

    def __delitem__(self, path: str) -> None:
        self.del_item(path)

    # ==================== Path Utilities ====================

    def _insert_node(self, node: PathStoreNode) -> None:
        """Add or replace a node; a replaced label keeps its position."""
        node.parent = self
        self._nodes[node.label] = node

    def _new_branch(self) -> PathStore:
        return type(self)(raise_on_missing=self.raise_on_missing)

    def _htraverse(
        self, path: str, autocreate: bool = False
    ) -> tuple[PathStore, str]:
        """Traverse path, optionally creating intermediate nodes.

        Args:
            path: Dotted path string.
            autocreate: If True, create missing intermediate branches and
                turn intermediate leaves into empty branches.

        Returns:
            Tuple of (parent_store, final_label)

        Raises:
            PropertyNotExistError: If an intermediate segment is missing or
                is a leaf and autocreate is False.
        """
        parts = tokenize(path)
        current = self

        for part in parts[:-1]:
            node = current._nodes.get(part)
            if node is None:
                if not autocreate:
                    raise PropertyNotExistError(path)
                node = PathStoreNode(part, current._new_branch())
                current._insert_node(node)
            elif not node.is_branch:
                if not autocreate:
                    raise PropertyNotExistError(path)
                # Leaf value is discarded
                logger.debug("Converting leaf %r to branch while writing %s", part, path)
                node.value = current._new_branch()
            current = node.value

        return current, parts[-1]

    # ==================== Core API ====================

    def set_item(
        self,
        path: str,
        value: Any,
        policy: Policy | str = Policy.OVERRIDE,
    ) -> PathStore:
        """Set a value at the given path, creating intermediate branches.

        Args:
            path: Dotted path to the item (e.g., 'app.database.host').
            value: Scalar, sequence of scalars, nested mapping of those,
                or an Importer whose to_dict() result is used.
            policy: What to do when the final key already exists.

        Returns:
            This PathStore, for chaining.

        Raises:
            InvalidPropertyError: If value holds a non-scalar leaf.
            PropertyOverrideError: If policy is PROTECT_EXCEPTION and the
                key already exists.

        Example:
            >>> store = PathStore().set_item('a.b', 1).set_item('a.c', [1, 2])
            >>> store.set_item('a.b', 2, Policy.PROTECT_SILENT)['a.b']
            1
        """
        policy = Policy(policy)
        if isinstance(value, Importer):
            value = value.to_dict()
        check_scalar_leaves(value, path)

        if policy is not Policy.OVERRIDE and self.exists(path):
            if policy is Policy.PROTECT_EXCEPTION:
                raise PropertyOverrideError(path)
            logger.debug("Property %s exists, write ignored", path)
            return self

        # Built before traversal, which mutates the tree
        node = make_node(self, tokenize(path)[-1], value)
        parent_store, _ = self._htraverse(path, autocreate=True)
        parent_store._insert_node(node)
        return self

    def get_item(self, path: str, default: Any = None) -> Any:
        """Get the value at the given path.

        Branches are returned as plain nested dicts, leaves as stored.

        Args:
            path: Dotted path.
            default: Returned for a missing path when raise_on_missing
                is False.

        Raises:
            PropertyNotExistError: If the path is missing and
                raise_on_missing is True.
        """
        try:
            node = self.get_node(path)
        except PropertyNotExistError:
            if self.raise_on_missing:
                raise
            return default
        return self._node_value(node)

    def get_node(self, path: str) -> PathStoreNode:
        """Get node at the given path.

        Raises:
            PropertyNotExistError: If path not found.
        """
        parent_store, label = self._htraverse(path)
        try:
            return parent_store._nodes[label]
        except KeyError:
            raise PropertyNotExistError(path) from None

    def del_item(self, path: str) -> PathStore:
        """Delete the value at path.

        A missing final key is ignored; a missing intermediate is not.

        Raises:
            PropertyNotExistError: If an intermediate segment is missing.
        """
        parent_store, label = self._htraverse(path)
        node = parent_store._nodes.pop(label, None)
        if node is not None:
            node.parent = None
        return self

    def exists(self, path: str) -> bool:
        """True if the full path resolves, whatever the value (even None)."""
        try:
            self.get_node(path)
        except PropertyNotExistError:
            return False
        return True

    # ==================== Import / Export ====================

    def import_from(self, source: Mapping[str, Any] | Importer) -> PathStore:
        """Replace the whole tree with the content of source.

        Args:
            source: Mapping or Importer, as for the constructor.

        Returns:
            This PathStore, for chaining.
        """
        mapping = self._resolve_source(source)
        self._nodes.clear()
        load_from_mapping(self, mapping)
        return self

    def export(self, sink: Exporter) -> PathStore:
        """Hand a snapshot of the whole tree to sink.

        The sink receives a plain dict it is free to keep.
        """
        logger.debug("Exporting %d top-level keys to %s", len(self), type(sink).__name__)
        sink.export(self.as_dict())
        return self

    # ==================== Iteration ====================

    @staticmethod
    def _node_value(node: PathStoreNode) -> Any:
        if node.is_branch:
            return node.value.as_dict()
        return copy_value(node.value)

    def iter_keys(self) -> Iterator[str]:
        """Yield top-level labels in insertion order."""
        yield from list(self._nodes)

    def iter_values(self) -> Iterator[Any]:
        """Yield top-level values in insertion order."""
        for node in list(self._nodes.values()):
            yield self._node_value(node)

    def iter_items(self) -> Iterator[tuple[str, Any]]:
        """Yield top-level (label, value) pairs in insertion order."""
        for node in list(self._nodes.values()):
            yield node.label, self._node_value(node)

    def keys(self) -> list[str]:
        """Return list of top-level labels in insertion order."""
        return list(self.iter_keys())

    def values(self) -> list[Any]:
        """Return list of top-level values in insertion order."""
        return list(self.iter_values())

    def items(self) -> list[tuple[str, Any]]:
        """Return list of top-level (label, value) pairs in insertion order."""
        return list(self.iter_items())

    def walk(self) -> Iterator[tuple[str, PathStoreNode]]:
        """Yield (dotted_path, node) for every node, depth first.

        Example:
            >>> for path, node in PathStore({'a': {'b': 1}}).walk():
            ...     print(path, node.is_branch)
            a True
            a.b False
        """
        def _walk_gen(
            store: PathStore, prefix: str | None
        ) -> Iterator[tuple[str, PathStoreNode]]:
            for node in list(store._nodes.values()):
                path = node.label if prefix is None else f"{prefix}.{node.label}"
                yield path, node
                if node.is_branch:
                    yield from _walk_gen(node.value, path)

        return _walk_gen(self, None)

    # ==================== Conversion ====================

    def as_dict(self) -> dict[str, Any]:
        """Convert to plain dict (recursive), keeping key order."""
        return {label: self._node_value(node) for label, node in self._nodes.items()}

    def to_json(self, **kwargs: Any) -> str:
        """Encode the whole tree as JSON.

        Args:
            **kwargs: Passed to json.dumps (indent, sort_keys, ...).
        """
        return json.dumps(self.as_dict(), **kwargs)

    def clear(self) -> PathStore:
        """Remove all top-level nodes."""
        self._nodes.clear()
        return self
