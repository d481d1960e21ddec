"""Attendance-to-pay calculation engine.

This package is organized by feature modules (attendance, roster, leave,
payroll, ...). Every component is a pure function of its explicit inputs:
records and an immutable ``PayrollConfig`` go in, records come out.
"""
