"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class Qualification(str, Enum):
    DOUBLES_ENDORSEMENT = "doubles_endorsement"
    CHAIN_EXPERIENCE = "chain_experience"


class PeriodStatus(str, Enum):
    UPCOMING = "UPCOMING"
    OPEN = "OPEN"
    CLOSED = "CLOSED"
    PROCESSING = "PROCESSING"
    COMPLETED = "COMPLETED"


# Statuses from which an assignment run may be started
PROCESSABLE_STATUSES = frozenset({PeriodStatus.OPEN, PeriodStatus.CLOSED})


class UnassignedReason(str, Enum):
    NO_PREFERENCES = "NO_PREFERENCES"
    ROUTES_CLAIMED = "ROUTES_CLAIMED"
    NOT_QUALIFIED = "NOT_QUALIFIED"
    MANUAL = "MANUAL"

    @property
    def description(self) -> str:
        return _UNASSIGNED_DESCRIPTIONS[self]


_UNASSIGNED_DESCRIPTIONS = {
    UnassignedReason.NO_PREFERENCES: "No route preferences submitted - assigned to float pool",
    UnassignedReason.ROUTES_CLAIMED: "All preferred routes were assigned to more senior employees",
    UnassignedReason.NOT_QUALIFIED: "Employee does not qualify for any of their preferred routes",
    UnassignedReason.MANUAL: "Manually placed in float pool",
}


CHOICE_LABELS = {1: "1st", 2: "2nd", 3: "3rd"}
