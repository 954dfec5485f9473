from datetime import date, timedelta
from functools import lru_cache

_SATURDAY = 5
_MONDAY = 0


def is_weekend(day: date) -> bool:
    return day.weekday() >= _SATURDAY


@lru_cache(maxsize=128)
def labor_day(year: int) -> date:
    """First Monday of September, found by walking forward from September 1."""
    day = date(year, 9, 1)
    while day.weekday() != _MONDAY:
        day += timedelta(days=1)
    return day


class HolidayCalendar:
    """
    The two holidays the rental counter observes.

    The year is always taken from the date being checked, so a rental in
    2022 uses 2022's Labor Day no matter when it is priced.
    """

    def is_observed_independence_day(self, day: date) -> bool:
        """
        July 4 counts only when it falls on a weekday. A weekend July 4 is
        not moved to the Friday before or the Monday after.
        """
        return day.month == 7 and day.day == 4 and not is_weekend(day)

    def is_labor_day(self, day: date) -> bool:
        return day == labor_day(day.year)

    def is_holiday(self, day: date) -> bool:
        return self.is_observed_independence_day(day) or self.is_labor_day(day)

    def holidays_for_year(self, year: int) -> list[date]:
        """
        Observed holidays of a year, in calendar order.

        :param year: Calendar year
        :return: Labor Day, preceded by Independence Day when it is observed
        """
        holidays = []

        independence_day = date(year, 7, 4)
        if self.is_observed_independence_day(independence_day):
            holidays.append(independence_day)

        holidays.append(labor_day(year))

        return holidays
