"""Timesheet role-permission service."""
