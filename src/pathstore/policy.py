# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Write policies and path tokenizing."""

from __future__ import annotations

from enum import Enum

SEPARATOR = '.'


class Policy(Enum):
    """Collision handling for the final segment of a write.

    - OVERRIDE: replace an existing key (default)
    - PROTECT_SILENT: keep an existing key, ignore the write
    - PROTECT_EXCEPTION: keep an existing key, raise PropertyOverrideError
    """

    OVERRIDE = 'override'
    PROTECT_SILENT = 'protect_silent'
    PROTECT_EXCEPTION = 'protect_exception'


def tokenize(path: str) -> list[str]:
    """Split a dotted path into its segments.

    The result is never empty: ``tokenize('')`` is ``['']``.

    Example:
        >>> tokenize('config.database.host')
        ['config', 'database', 'host']
    """
    return path.split(SEPARATOR)
