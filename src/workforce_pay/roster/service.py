from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional

from .model import Location, RosterEntry

logger = logging.getLogger(__name__)


def find_roster_entry(roster: Iterable[RosterEntry], *, employee_id: str, work_date: date) -> Optional[RosterEntry]:
    """Return the first entry for (employee, date) in input order.

    Duplicate entries are not rejected upstream; the first one wins and the
    rest are reported in the log.
    """
    matches = [r for r in roster if r.employee_id == employee_id and r.work_date == work_date]
    if not matches:
        return None
    if len(matches) > 1:
        logger.warning(
            "%d roster entries for %s on %s, using the first (%s-%s at %s)",
            len(matches),
            employee_id,
            work_date,
            matches[0].shift_start,
            matches[0].shift_end,
            matches[0].location,
        )
    return matches[0]


def find_location(locations: Iterable[Location], name: str) -> Optional[Location]:
    for loc in locations:
        if loc.name == name:
            return loc
    return None
