from .date import InvalidDateError, to_date, to_optional_date

__all__ = ["InvalidDateError", "to_date", "to_optional_date"]
