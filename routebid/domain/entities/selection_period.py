"""SelectionPeriod entity — one bidding window, the scope of an assignment run."""

from dataclasses import dataclass

from routebid.domain.value_objects.enums import PROCESSABLE_STATUSES, PeriodStatus


@dataclass
class SelectionPeriod:
    id: int | None
    name: str
    terminal_id: int
    status: PeriodStatus = PeriodStatus.UPCOMING
    required_selections: int = 3

    def is_processable(self) -> bool:
        return self.status in PROCESSABLE_STATUSES

    def is_completed(self) -> bool:
        return self.status == PeriodStatus.COMPLETED
