"""Shared application constants."""

# Weekday names mapped to datetime.weekday() numbers (Monday = 0)
WEEKDAYS = {
    "monday": 0,
    "tuesday": 1,
    "wednesday": 2,
    "thursday": 3,
    "friday": 4,
    "saturday": 5,
    "sunday": 6,
}

# Bounds for Goal.desired_weekly_frequency (at most once a day)
MIN_WEEKLY_FREQUENCY = 1
MAX_WEEKLY_FREQUENCY = 7
