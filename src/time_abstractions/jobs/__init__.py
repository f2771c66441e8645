"""Recurring jobs driven by a :class:`~time_abstractions.clocks.base.Clock`."""

from time_abstractions.jobs.daily import DailyJob

__all__ = ["DailyJob"]
