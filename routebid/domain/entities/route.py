"""Route entity — an exclusively assignable run with qualification requirements."""

from dataclasses import dataclass, field

from routebid.domain.value_objects.enums import Qualification


@dataclass
class Route:
    id: int | None
    run_number: str
    requirements: frozenset[Qualification] = field(default_factory=frozenset)
    origin: str | None = None
    destination: str | None = None
    is_active: bool = True
