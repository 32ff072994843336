# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Importer and Exporter - collaborators at the PathStore boundary.

Concrete backends (files, environment, databases) live outside this
package. They only need to subclass one of these bases.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping


class Importer(ABC):
    """Source of a full nested mapping for a PathStore.

    Example:
        >>> class Defaults(Importer):
        ...     def to_dict(self):
        ...         return {'server': {'port': 8080}}
        >>> PathStore(Defaults())['server.port']
        8080
    """

    @abstractmethod
    def to_dict(self) -> Mapping[str, Any]:
        """Return the nested mapping representation of external state."""


class Exporter(ABC):
    """Sink receiving the full nested mapping of a PathStore."""

    @abstractmethod
    def export(self, data: dict[str, Any]) -> None:
        """Persist ``data`` however the sink sees fit."""
