"""
DateTime Parser Utility
Shared utility for parsing dates from query parameters
"""
from datetime import date, datetime
from typing import Optional
from zoneinfo import ZoneInfo

from domain.constants import App
from domain.exceptions import InvalidDateTimeException


class DateTimeParser:
    """Parse dates from API query parameters"""

    DEFAULT_TIMEZONE = App.TIMEZONE

    @staticmethod
    def now(timezone: str = DEFAULT_TIMEZONE) -> datetime:
        """Momento atual no timezone da aplicação"""
        return datetime.now(tz=ZoneInfo(timezone))

    @staticmethod
    def parse_date(
        date_str: Optional[str] = None,
        timezone: str = DEFAULT_TIMEZONE
    ) -> date:
        """
        Parse date from query string parameter

        Args:
            date_str: Date in YYYY-MM-DD format (optional)
            timezone: Timezone name used for "today" (default: App.TIMEZONE)

        Returns:
            Parsed date, or today's date in the timezone when date_str is None

        Raises:
            InvalidDateTimeException: If format is invalid

        Examples:
            >>> DateTimeParser.parse_date("2025-06-14")
            datetime.date(2025, 6, 14)
        """
        if date_str is None or not date_str.strip():
            return DateTimeParser.now(timezone).date()

        try:
            return datetime.strptime(date_str.strip(), "%Y-%m-%d").date()
        except ValueError as e:
            raise InvalidDateTimeException(
                f"Invalid date format. Use date=YYYY-MM-DD. Error: {str(e)}",
                details={"date": date_str}
            )

    @staticmethod
    def remaining_hours_start(target_date: date, timezone: str = DEFAULT_TIMEZONE) -> Optional[int]:
        """
        Primeira hora ainda relevante do dia pedido

        Returns:
            Hora atual se target_date for hoje; None para outros dias
        """
        now = DateTimeParser.now(timezone)
        if target_date == now.date():
            return now.hour
        return None
