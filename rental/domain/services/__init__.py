from .charge_service import ChargeService
from .holiday_calendar import HolidayCalendar

__all__ = [
    "ChargeService",
    "HolidayCalendar",
]
