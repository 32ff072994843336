# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Loading and value helpers for PathStore.

Functions here convert plain nested mappings into owned PathStore nodes
and check values before they are written.
"""

from __future__ import annotations

from typing import Any, Mapping, TYPE_CHECKING

from ..exceptions import InvalidPropertyError
from ..node import PathStoreNode

if TYPE_CHECKING:
    from .core import PathStore

SCALAR_TYPES = (str, int, float, bool)
SEQUENCE_TYPES = (list, tuple)


def is_scalar(value: Any) -> bool:
    """True for str, int, float, bool and None."""
    return value is None or isinstance(value, SCALAR_TYPES)


def check_scalar_leaves(value: Any, path: str, _in_sequence: bool = False) -> None:
    """Check that every terminal value inside ``value`` is scalar.

    Mappings may hold scalars, sequences and further mappings. Sequences
    may hold scalars and further sequences; a mapping inside a sequence
    could not be reached by path and is rejected. Mapping keys must be
    strings, the only labels a dotted path can address.

    Args:
        value: The value about to be written.
        path: The path being written, reported in the error.

    Raises:
        InvalidPropertyError: If any terminal value is not scalar, or a
            mapping key is not a string.
    """
    if isinstance(value, Mapping):
        if _in_sequence:
            raise InvalidPropertyError(path)
        for key, item in value.items():
            if not isinstance(key, str):
                raise InvalidPropertyError(path)
            check_scalar_leaves(item, path)
    elif isinstance(value, SEQUENCE_TYPES):
        for item in value:
            check_scalar_leaves(item, path, _in_sequence=True)
    elif not is_scalar(value):
        raise InvalidPropertyError(path)


def copy_value(value: Any) -> Any:
    """Return a copy of a leaf value that shares no containers with it."""
    if isinstance(value, Mapping):
        return {key: copy_value(item) for key, item in value.items()}
    if isinstance(value, tuple):
        # Subclasses such as namedtuples come back as plain tuples
        return tuple(copy_value(item) for item in value)
    if isinstance(value, list):
        return [copy_value(item) for item in value]
    return value


def make_node(store: PathStore, label: str, value: Any) -> PathStoreNode:
    """Build a node for ``value`` under ``store``.

    Mappings become branches holding a new PathStore, anything else
    becomes a leaf holding a copy of the value.
    """
    if isinstance(value, Mapping):
        child = type(store)(raise_on_missing=store.raise_on_missing)
        node = PathStoreNode(label, child, parent=store)
        load_from_mapping(child, value)
        return node
    return PathStoreNode(label, copy_value(value), parent=store)


def load_from_mapping(store: PathStore, source: Mapping[str, Any]) -> None:
    """Load a nested mapping into ``store``, replacing same-label nodes.

    Args:
        store: The PathStore to populate.
        source: Nested mapping; its insertion order is kept at every level.
    """
    for label, value in source.items():
        store._insert_node(make_node(store, label, value))
