"""Time window definitions."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from holding_metrics.domain.models.enums import CalendarUnit, WindowKind


@dataclass(frozen=True)
class WindowSpec:
    """A named rule mapping `now` to a start instant."""

    window_id: str
    label: str
    kind: WindowKind
    days: Optional[int] = None
    unit: Optional[CalendarUnit] = None


@dataclass(frozen=True)
class ResolvedWindow:
    """A window pinned to a concrete UTC start instant."""

    spec: WindowSpec
    start_instant: datetime

    @property
    def window_id(self) -> str:
        return self.spec.window_id

    @property
    def kind(self) -> WindowKind:
        return self.spec.kind


# Display order matters: available_windows() preserves it.
WINDOWS: dict[str, WindowSpec] = {
    spec.window_id: spec
    for spec in (
        WindowSpec("1d", "1 Day", WindowKind.CALENDAR, unit=CalendarUnit.YESTERDAY),
        WindowSpec("wtd", "This Week", WindowKind.CALENDAR, unit=CalendarUnit.WEEK),
        WindowSpec("mtd", "This Month", WindowKind.CALENDAR, unit=CalendarUnit.MONTH),
        WindowSpec("ytd", "This Year", WindowKind.CALENDAR, unit=CalendarUnit.YEAR),
        WindowSpec("7d", "7 Days", WindowKind.FIXED_DAYS, days=7),
        WindowSpec("30d", "30 Days", WindowKind.FIXED_DAYS, days=30),
        WindowSpec("3mo", "3 Months", WindowKind.FIXED_DAYS, days=90),
        WindowSpec("6mo", "6 Months", WindowKind.FIXED_DAYS, days=180),
        WindowSpec("1y", "1 Year", WindowKind.FIXED_DAYS, days=365),
        WindowSpec("5y", "5 Years", WindowKind.FIXED_DAYS, days=1825),
        WindowSpec("all", "All Time", WindowKind.ALL),
    )
}
