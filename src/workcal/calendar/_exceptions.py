class CalendarError(ValueError):
    """Raised for calendar misconfiguration: bad weekdays, limits, names or units."""
