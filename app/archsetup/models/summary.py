"""Run summary model.

A RunSummary is created at the start of a provisioning run, filled in
as packages are processed, and finalized when the run ends. It is never
persisted; the run log is the only durable trace.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from archsetup.models.package import (
    ClassifiedPackages,
    InstallOutcome,
    PackageRecord,
    PackageSource,
)
from archsetup.models.service import ServiceResult


@dataclass
class RunSummary:
    """Counts and per-package decisions of one provisioning run.

    Attributes:
        classified: Number of names classified into each source.
        records: Per-package decisions in processing order.
        services: Results of systemd unit enablement.
        started_at: When the run started.
        finished_at: When the run was finalized, or None while running.
    """

    classified: dict[PackageSource, int] = field(default_factory=lambda: {})
    records: list[PackageRecord] = field(default_factory=lambda: [])
    services: list[ServiceResult] = field(default_factory=lambda: [])
    started_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    finished_at: datetime | None = None

    def set_classification(self, classified: ClassifiedPackages) -> None:
        """Record per-source classification counts."""
        self.classified = {
            PackageSource.OFFICIAL: len(classified.official),
            PackageSource.COMMUNITY: len(classified.community),
        }

    def add(self, record: PackageRecord) -> None:
        """Append a per-package record."""
        self.records.append(record)

    def count(
        self,
        source: PackageSource | None = None,
        outcome: InstallOutcome | None = None,
    ) -> int:
        """Count records matching the given source and outcome.

        Args:
            source: Restrict to this source. None matches any source.
            outcome: Restrict to this outcome. None matches any outcome.

        Returns:
            Number of matching records.
        """
        return sum(
            1
            for r in self.records
            if (source is None or r.source == source)
            and (outcome is None or r.outcome == outcome)
        )

    def classified_count(self, source: PackageSource) -> int:
        """Return the number of names classified into a source."""
        return self.classified.get(source, 0)

    @property
    def has_failures(self) -> bool:
        """Check if any package failed to install."""
        return any(r.failed for r in self.records)

    @property
    def is_finished(self) -> bool:
        """Check if the summary was finalized."""
        return self.finished_at is not None

    def finalize(self) -> None:
        """Mark the run as finished."""
        self.finished_at = datetime.now(UTC)
