from __future__ import annotations

import importlib
from dataclasses import dataclass
from typing import Mapping, Optional

from .attendance.factory import AttendanceStrategyFactory
from .attendance.service import AttendanceClassifier
from .payroll.calculator.leave import LeaveDeductionCalculator
from .payroll.calculator.standard_calculator import StandardPayCalculator
from .payroll.calculator.transport import TransportAllowanceCalculator
from .payroll.config import PayrollConfig
from .payroll.service import PayrollAggregator


@dataclass(frozen=True)
class Container:
    config: PayrollConfig

    classifier: AttendanceClassifier
    pay_calculator: StandardPayCalculator
    leave_calculator: LeaveDeductionCalculator
    transport_calculator: TransportAllowanceCalculator
    aggregator: PayrollAggregator


def load_payroll_settings(module: Optional[str] = None) -> dict:
    """PAYROLL overrides from the active settings module (see ``config``)."""
    if module is None:
        from config import get_settings_module

        module = get_settings_module()
    settings = importlib.import_module(module)
    return dict(getattr(settings, "PAYROLL", {}) or {})


def build_container(*, payroll_settings: Optional[Mapping] = None) -> Container:
    config = PayrollConfig.from_mapping(payroll_settings)

    pay_calculator = StandardPayCalculator(config)
    leave_calculator = LeaveDeductionCalculator(config)
    transport_calculator = TransportAllowanceCalculator()
    classifier = AttendanceClassifier(config, strategy_factory=AttendanceStrategyFactory())
    aggregator = PayrollAggregator(
        config,
        calculator=pay_calculator,
        leave_calculator=leave_calculator,
        transport_calculator=transport_calculator,
    )

    return Container(
        config=config,
        classifier=classifier,
        pay_calculator=pay_calculator,
        leave_calculator=leave_calculator,
        transport_calculator=transport_calculator,
        aggregator=aggregator,
    )
