"""Service models for systemd unit enablement."""

from dataclasses import dataclass
from enum import Enum


class ServiceScope(Enum):
    """systemd manager a unit belongs to."""

    SYSTEM = "system"
    USER = "user"


class ServiceOutcome(Enum):
    """Outcome of enabling a single unit."""

    ALREADY_ENABLED = "already_enabled"
    ENABLED = "enabled"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class ServiceResult:
    """Result of enabling a systemd unit.

    Attributes:
        unit: Unit name (e.g., 'sddm', 'docker.service').
        scope: System or user manager.
        outcome: What happened to the unit.
        error: Optional error message if enabling failed.
    """

    unit: str
    scope: ServiceScope
    outcome: ServiceOutcome
    error: str | None = None

    @property
    def failed(self) -> bool:
        """Check if enabling the unit failed."""
        return self.outcome == ServiceOutcome.FAILED
