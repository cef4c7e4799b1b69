"""
Domain enums for NutriTrack application.
"""

import enum


class Weekday(str, enum.Enum):
    """Day names used by the weekly nutrition summary, Sunday first.

    ``index`` follows the Sunday=1 ... Saturday=7 convention used when
    bucketing food-log entries.
    """

    SUN = "Sun"
    MON = "Mon"
    TUE = "Tue"
    WED = "Wed"
    THU = "Thu"
    FRI = "Fri"
    SAT = "Sat"

    @property
    def index(self) -> int:
        return list(Weekday).index(self) + 1
