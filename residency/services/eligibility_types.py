"""Value objects for eligibility calculations."""

from dataclasses import dataclass, field
from datetime import date

from residency.constants import StatusCategory


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of calendar days."""

    start: date
    end: date


@dataclass(frozen=True)
class StatusPeriod:
    """A closed period held under one status category."""

    status: StatusCategory
    start: date
    end: date

    @property
    def range(self) -> DateRange:
        return DateRange(self.start, self.end)


@dataclass
class NormalizedProfile:
    """Profile reduced to parsed dates, whatever shape it was supplied in."""

    qualifying_since: date | None
    periods: list[StatusPeriod] = field(default_factory=list)
    pre_qualifying_periods: list[StatusPeriod] = field(default_factory=list)
    absences: list[DateRange] = field(default_factory=list)


@dataclass
class PartialCreditResult:
    """Partial-credit calculation result."""

    gross_days: int
    absence_days_deducted: int
    net_days: int
    net_credit: int
