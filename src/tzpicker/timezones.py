# Copyright (c) LinkedIn Corporation. All rights reserved. Licensed under the BSD-2 Clause license.
# See LICENSE in the project root for license information.

"""
Read access to the supported timezone list.

The list itself lives in :mod:`tzpicker.constants` and is sorted once at
import. Nothing here consults a timezone database; :func:`is_well_formed`
only checks the ``Area/Location`` shape of a name.
"""

import re
from typing import Iterable, List, Tuple

from .constants import SUPPORTED_TIMEZONES

# Area, then one or more "/"-separated location parts, e.g. America/Argentina/Salta
_IDENTIFIER_RE = re.compile(r"^[A-Za-z][A-Za-z0-9_+\-]*(/[A-Za-z0-9][A-Za-z0-9_+\-]*)+$")


def get_timezones() -> Tuple[str, ...]:
    """Returns the supported timezone identifiers, sorted ascending."""
    return SUPPORTED_TIMEZONES


def is_well_formed(name: str) -> bool:
    """
    Checks that ``name`` looks like an IANA ``Area/Location`` identifier.

    This is a syntactic check only. ``"Mars/Olympus_Mons"`` passes.
    """
    if not isinstance(name, str):
        return False
    return _IDENTIFIER_RE.match(name) is not None


def check_timezones(zones: Iterable[str]) -> List[str]:
    """
    Returns a list of problems found in ``zones``.

    Each problem is a human readable string naming a malformed or duplicated
    entry. An empty list means every entry is well formed and unique.
    """
    problems = []
    seen = set()
    for zone in zones:
        if not is_well_formed(zone):
            problems.append("malformed timezone identifier: %r" % (zone,))
        if zone in seen:
            problems.append("duplicate timezone identifier: %r" % (zone,))
        seen.add(zone)
    return problems
