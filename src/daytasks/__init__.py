"""daytasks: a date-scoped to-do list with daily reminders."""

__version__ = "0.1.0"
