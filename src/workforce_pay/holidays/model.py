from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Mapping

from ..common.datetime_utils import parse_iso_date
from ..core.enums import HolidayType
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class Holiday:
    holiday_date: date
    name: str = ""
    type: HolidayType = HolidayType.PUBLIC
    is_paid: bool = True

    @classmethod
    def from_mapping(cls, row: Mapping) -> "Holiday":
        """Build a holiday from a raw row keyed ``holiday_date`` or ``date``."""
        try:
            holiday_type = HolidayType(row.get("type") or HolidayType.PUBLIC)
        except ValueError as e:
            raise ValidationError(str(e))

        is_paid = row.get("is_paid")
        return cls(
            holiday_date=parse_iso_date(row.get("holiday_date") or row.get("date")),
            name=row.get("name") or "",
            type=holiday_type,
            is_paid=True if is_paid is None else bool(is_paid),
        )
