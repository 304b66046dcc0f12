"""Payroll System package.

This package is organized by feature modules (employees, teams, payroll, reports, ...)
with a thin command controller layer on top of service/repository layers.
"""
