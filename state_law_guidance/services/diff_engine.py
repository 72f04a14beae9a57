"""
Computes and ranks law differences between two jurisdictions.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from state_law_guidance.constants import NOTIFIABLE_IMPORTANCE
from state_law_guidance.models.laws import LawCategory, LawDifference, LawRecord
from state_law_guidance.services.law_catalog import LawCatalog

logger = logging.getLogger(__name__)


def values_differ(from_value: str, to_value: str) -> bool:
    """Whether two rule values count as different.

    Exact string comparison: "$16.00/hour" and "$16/hr" differ, as do values that
    only differ in case or whitespace.
    """
    return from_value != to_value


def _ordered_categories(categories: Iterable[LawCategory] | None) -> list[LawCategory]:
    if categories is None:
        return list(LawCategory)
    wanted = {LawCategory.parse(c) for c in categories}
    return [c for c in LawCategory if c in wanted]


class DiffEngine:
    """Matches law records by (category, title) and ranks the mismatches."""

    def __init__(self, catalog: LawCatalog):
        self.catalog = catalog

    def diff(
        self,
        from_code: str,
        to_code: str,
        categories: Iterable[LawCategory] | None = None,
    ) -> list[LawDifference]:
        """Ranked differences from one jurisdiction to another.

        Titles present in only one of the two jurisdictions are skipped. The
        result is sorted by importance, highest first; equal importance keeps
        category order and then the order of the "from" records.
        """
        from_records = self.catalog.get_records(from_code)
        to_records = self.catalog.get_records(to_code)
        if not from_records or not to_records:
            logger.debug(f"No law data for diff {from_code} -> {to_code}")
            return []

        differences: list[LawDifference] = []
        for category in _ordered_categories(categories):
            from_in_category = [r for r in from_records if r.category == category]
            to_in_category = [r for r in to_records if r.category == category]

            for from_law in from_in_category:
                to_law = _find_by_key(to_in_category, from_law.key)
                if to_law is None:
                    continue
                if values_differ(from_law.value, to_law.value):
                    differences.append(
                        LawDifference(
                            category=category,
                            law_title=from_law.title,
                            from_jurisdiction=from_code,
                            from_value=from_law.value,
                            to_jurisdiction=to_code,
                            to_value=to_law.value,
                            description=from_law.description,
                            importance=max(from_law.importance, to_law.importance),
                        )
                    )

        # sorted() is stable, so ties keep encounter order
        ranked = sorted(differences, key=lambda d: d.importance, reverse=True)
        logger.debug(f"Diff {from_code} -> {to_code}: {len(ranked)} differences")
        return ranked

    def critical_differences(
        self, from_code: str, to_code: str, limit: int = 3
    ) -> list[LawDifference]:
        """The first `limit` high or critical differences, in ranked order."""
        notable = [
            d for d in self.diff(from_code, to_code) if d.importance in NOTIFIABLE_IMPORTANCE
        ]
        return notable[: max(limit, 0)]


def _find_by_key(
    records: list[LawRecord], key: tuple[LawCategory, str]
) -> LawRecord | None:
    # Keys are unique per jurisdiction (enforced by Jurisdiction)
    for record in records:
        if record.key == key:
            return record
    return None
