"""Immutable payroll configuration.

The engine never reads global settings. Callers build one ``PayrollConfig``
(usually via ``PayrollConfig.from_mapping`` with deployment overrides) and
pass it into each component. Reloading configuration means building a new
instance, never mutating one that in-flight calculations hold.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from types import MappingProxyType
from typing import Mapping, Optional

from ..common.validators import optional_number, require_non_negative, require_positive
from ..core import constants
from ..core.enums import LeaveType, OvertimeTier, TransportDayBasis
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class OvertimeTiers:
    """Flat overtime rates in currency per hour (not multipliers)."""

    regular: float = constants.DEFAULT_OT_RATE_REGULAR
    sunday: float = constants.DEFAULT_OT_RATE_SUNDAY
    holiday: float = constants.DEFAULT_OT_RATE_HOLIDAY
    extended: float = constants.DEFAULT_OT_RATE_EXTENDED

    def rate_for(self, tier: OvertimeTier) -> float:
        return getattr(self, tier.value)


@dataclass(frozen=True)
class MealAllowance:
    amount: float = constants.DEFAULT_MEAL_ALLOWANCE
    minimum_hours: float = constants.DEFAULT_MEAL_ALLOWANCE_MIN_HOURS
    enabled: bool = True


def _default_position_salaries() -> Mapping[str, float]:
    return MappingProxyType(dict(constants.DEFAULT_POSITION_SALARIES))


def _default_unpaid_leave_types() -> frozenset:
    return frozenset({LeaveType.UNPAID, LeaveType.UNPAID_SICK})


@dataclass(frozen=True)
class PayrollConfig:
    base_monthly_salary: Optional[float] = constants.DEFAULT_MONTHLY_BASE_SALARY
    working_days_per_month: float = constants.DEFAULT_WORKING_DAYS_PER_MONTH
    standard_daily_hours: float = constants.DEFAULT_STANDARD_DAILY_HOURS
    overtime_tiers: OvertimeTiers = field(default_factory=OvertimeTiers)
    meal_allowance: MealAllowance = field(default_factory=MealAllowance)
    leave_divisor_days: float = constants.DEFAULT_LEAVE_DIVISOR_DAYS
    late_threshold_minutes: int = constants.DEFAULT_LATE_THRESHOLD_MINUTES
    # Total daily hours after which overtime is paid at the extended rate.
    extended_after_hours: Optional[float] = None
    position_salaries: Mapping[str, float] = field(default_factory=_default_position_salaries)
    unpaid_leave_types: frozenset = field(default_factory=_default_unpaid_leave_types)
    qr_token_ttl_minutes: int = constants.DEFAULT_QR_TOKEN_TTL_MINUTES
    transport_day_basis: TransportDayBasis = TransportDayBasis.RECORDED

    def __post_init__(self):
        require_positive(self.working_days_per_month, "working_days_per_month")
        require_positive(self.standard_daily_hours, "standard_daily_hours")
        require_positive(self.leave_divisor_days, "leave_divisor_days")
        require_non_negative(self.late_threshold_minutes, "late_threshold_minutes")
        require_positive(self.qr_token_ttl_minutes, "qr_token_ttl_minutes")
        optional_number(self.base_monthly_salary, "base_monthly_salary")
        if self.extended_after_hours is not None:
            require_positive(self.extended_after_hours, "extended_after_hours")
        for tier in OvertimeTier:
            require_non_negative(self.overtime_tiers.rate_for(tier), f"overtime_tiers.{tier.value}")
        require_non_negative(self.meal_allowance.amount, "meal_allowance.amount")
        require_non_negative(self.meal_allowance.minimum_hours, "meal_allowance.minimum_hours")
        try:
            TransportDayBasis(self.transport_day_basis)
        except ValueError as e:
            raise ValidationError(str(e))

    @classmethod
    def from_mapping(cls, overrides: Optional[Mapping] = None) -> "PayrollConfig":
        """Merge a partial (possibly nested) override mapping onto the defaults.

        Keys left out keep their documented default; unknown keys raise
        ValidationError so a typo in deployment settings is not silently
        ignored.
        """
        return cls().merged(overrides or {})

    def merged(self, overrides: Mapping) -> "PayrollConfig":
        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise ValidationError(f"Unknown payroll setting(s): {', '.join(sorted(unknown))}")

        changes = {}
        for key, value in overrides.items():
            if key == "overtime_tiers":
                changes[key] = _merge_section(self.overtime_tiers, value, key)
            elif key == "meal_allowance":
                changes[key] = _merge_section(self.meal_allowance, value, key)
            elif key == "position_salaries":
                merged = dict(self.position_salaries)
                merged.update({str(k): require_non_negative(v, f"position_salaries.{k}") for k, v in value.items()})
                changes[key] = MappingProxyType(merged)
            elif key == "unpaid_leave_types":
                try:
                    changes[key] = frozenset(LeaveType(v) for v in value)
                except ValueError as e:
                    raise ValidationError(str(e))
            elif key == "transport_day_basis":
                try:
                    changes[key] = TransportDayBasis(value)
                except ValueError as e:
                    raise ValidationError(str(e))
            else:
                changes[key] = value
        return replace(self, **changes)


def _merge_section(current, value, name: str):
    if isinstance(value, type(current)):
        return value
    if not isinstance(value, Mapping):
        raise ValidationError(f"{name} must be a mapping")
    known = {f.name for f in fields(current)}
    unknown = set(value) - known
    if unknown:
        raise ValidationError(f"Unknown {name} setting(s): {', '.join(sorted(unknown))}")
    return replace(current, **value)


DEFAULT_CONFIG = PayrollConfig()
