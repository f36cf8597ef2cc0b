"""Cross-checks of declared against observed record counts."""

import logging
from collections import Counter

from ..errors import CountMismatch, DuplicateSummary, MissingSummary
from ..models import RecordLine, ResourceType, SummaryLine, VersionLine

logger = logging.getLogger(__name__)


class ConsistencyValidator:
    """
    Accumulate record counts for one decode session.

    Counters are fed as lines are decoded and compared with the version
    line's total and the per-type summary counts by finalize(). Create
    one validator per listing.
    """

    def __init__(self, strict_summaries: bool = False):
        self.strict_summaries = strict_summaries
        self.declared_total: int | None = None
        self.declared: dict[ResourceType, int] = {}
        self.total = 0
        self.counts: Counter[ResourceType] = Counter()

    def observe_version(self, version: VersionLine) -> None:
        """Record the declared total record count."""
        self.declared_total = version.records

    def observe_summary(self, summary: SummaryLine, line_number: int) -> None:
        """
        Record a summary's declared count.

        Raises:
            DuplicateSummary: If the resource type already has a summary
        """
        if summary.type in self.declared:
            raise DuplicateSummary(
                f"second summary line for {summary.type}", line_number, "type"
            )
        self.declared[summary.type] = summary.count

    def observe_record(self, record: RecordLine) -> None:
        """Count a decoded record."""
        self.total += 1
        self.counts[record.type] += 1

    def finalize(self) -> list[MissingSummary]:
        """
        Compare observed counts with the declared ones.

        Returns:
            MissingSummary warnings for resource types that have records
            but no summary line

        Raises:
            CountMismatch: For the first count that disagrees, total first
            MissingSummary: For the first unsummarised type, if strict
        """
        if self.declared_total is not None and self.declared_total != self.total:
            raise CountMismatch(self.declared_total, self.total, "total")

        for resource_type in ResourceType:
            if resource_type not in self.declared:
                continue
            expected = self.declared[resource_type]
            actual = self.counts[resource_type]
            if expected != actual:
                raise CountMismatch(expected, actual, resource_type)

        warnings: list[MissingSummary] = []
        for resource_type in ResourceType:
            observed = self.counts[resource_type]
            if observed and resource_type not in self.declared:
                missing = MissingSummary(resource_type, observed)
                if self.strict_summaries:
                    raise missing
                logger.warning("%s", missing)
                warnings.append(missing)

        return warnings
