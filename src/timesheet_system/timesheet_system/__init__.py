"""Timesheet System package.

Feature modules (clock, weeks, shifts, timesheets, settings) hold the pure
time arithmetic; a thin Flask controller layer exposes it as JSON.
"""
