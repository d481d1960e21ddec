import os


def _env_number(name: str, cast=float):
    value = os.environ.get(name)
    if value is None or value.strip() == "":
        return None
    return cast(value)


def payroll_overrides_from_env() -> dict:
    """Payroll settings overridden through environment variables.

    Only variables that are set end up in the result, so everything else
    keeps the engine's documented defaults.
    """
    top = {
        "base_monthly_salary": _env_number("PAYROLL_BASE_MONTHLY_SALARY"),
        "working_days_per_month": _env_number("PAYROLL_WORKING_DAYS_PER_MONTH"),
        "standard_daily_hours": _env_number("PAYROLL_STANDARD_DAILY_HOURS"),
        "leave_divisor_days": _env_number("PAYROLL_LEAVE_DIVISOR_DAYS"),
        "late_threshold_minutes": _env_number("PAYROLL_LATE_THRESHOLD_MINUTES", int),
        "extended_after_hours": _env_number("PAYROLL_EXTENDED_AFTER_HOURS"),
        "qr_token_ttl_minutes": _env_number("QR_TOKEN_TTL_MINUTES", int),
    }
    tiers = {
        "regular": _env_number("OT_RATE_REGULAR"),
        "sunday": _env_number("OT_RATE_SUNDAY"),
        "holiday": _env_number("OT_RATE_HOLIDAY"),
        "extended": _env_number("OT_RATE_EXTENDED"),
    }
    meal = {
        "amount": _env_number("MEAL_ALLOWANCE"),
        "minimum_hours": _env_number("MEAL_ALLOWANCE_MIN_HOURS"),
    }

    overrides = {k: v for k, v in top.items() if v is not None}
    basis = os.environ.get("PAYROLL_TRANSPORT_DAY_BASIS", "").strip()
    if basis:
        overrides["transport_day_basis"] = basis
    tiers = {k: v for k, v in tiers.items() if v is not None}
    meal = {k: v for k, v in meal.items() if v is not None}
    if tiers:
        overrides["overtime_tiers"] = tiers
    if meal:
        overrides["meal_allowance"] = meal
    return overrides
