from __future__ import annotations

import logging
from datetime import date
from typing import Iterable

from ...common.datetime_utils import parse_iso_date
from ...common.money import round2
from ...core.enums import OvertimeTier
from ...holidays.model import Holiday
from ..config import OvertimeTiers

logger = logging.getLogger(__name__)

SUNDAY = 6


class RateResolver:
    """Picks the overtime tier for a work date.

    Precedence: listed holiday, then Sunday, then the regular weekday tier.
    """

    def __init__(self, tiers: OvertimeTiers, holidays: Iterable[Holiday] = ()):
        self._tiers = tiers
        self._holiday_dates = frozenset(parse_iso_date(h.holiday_date) for h in holidays)

    def is_holiday(self, work_date: date) -> bool:
        return parse_iso_date(work_date) in self._holiday_dates

    @staticmethod
    def is_sunday(work_date: date) -> bool:
        return work_date.weekday() == SUNDAY

    def resolve(self, work_date: date) -> OvertimeTier:
        work_date = parse_iso_date(work_date)
        if self.is_holiday(work_date):
            tier = OvertimeTier.HOLIDAY
        elif self.is_sunday(work_date):
            tier = OvertimeTier.SUNDAY
        else:
            tier = OvertimeTier.REGULAR
        logger.debug("overtime tier for %s: %s", work_date, tier.value)
        return tier

    def rate_for(self, tier: OvertimeTier) -> float:
        return self._tiers.rate_for(tier)


def overtime_pay(hourly_rate: float, hours: float, multiplier: float) -> float:
    """Multiplier-based overtime, for deployments that express tiers as factors."""
    if hours <= 0:
        return 0.0
    return round2(hourly_rate * hours * multiplier)
