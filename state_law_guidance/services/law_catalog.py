"""
Static law reference data, loaded once from the bundled JSON catalog.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, ValidationError, field_validator

from state_law_guidance.config import get_settings
from state_law_guidance.domain.errors import CatalogLoadError
from state_law_guidance.models.laws import Jurisdiction, LawCategory, LawRecord

logger = logging.getLogger(__name__)


class CatalogFile(BaseModel):
    """On-disk shape of the law catalog."""

    version: str
    jurisdictions: list[Jurisdiction]

    @field_validator("jurisdictions")
    @classmethod
    def validate_unique_codes(cls, v: list[Jurisdiction]) -> list[Jurisdiction]:
        seen: set[str] = set()
        for jurisdiction in v:
            if jurisdiction.code in seen:
                raise ValueError(f"Duplicate jurisdiction code: {jurisdiction.code}")
            seen.add(jurisdiction.code)
        return v


class LawCatalog:
    """Read-only lookup of jurisdictions and their law records.

    Codes are matched exactly; normalizing state names to codes is the
    location collaborator's job.
    """

    def __init__(self, jurisdictions: Iterable[Jurisdiction], version: str = "unversioned"):
        self.version = version
        self._by_code: dict[str, Jurisdiction] = {}
        for jurisdiction in jurisdictions:
            self._by_code[jurisdiction.code] = jurisdiction

    @classmethod
    def from_file(cls, path: Path | str) -> LawCatalog:
        path = Path(path)
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise CatalogLoadError(f"Law catalog not found: {path}") from e
        except json.JSONDecodeError as e:
            raise CatalogLoadError(f"Law catalog is not valid JSON: {path}: {e}") from e

        try:
            parsed = CatalogFile.model_validate(raw)
        except ValidationError as e:
            raise CatalogLoadError(f"Law catalog failed validation: {path}: {e}") from e

        catalog = cls(parsed.jurisdictions, version=parsed.version)
        logger.info(
            f"Loaded law catalog v{catalog.version}: "
            f"{len(catalog)} jurisdictions, {catalog.record_count()} records"
        )
        return catalog

    def __len__(self) -> int:
        return len(self._by_code)

    def __contains__(self, code: object) -> bool:
        return code in self._by_code

    def get_records(self, code: str) -> tuple[LawRecord, ...]:
        """Law records for a jurisdiction; empty for unknown codes."""
        jurisdiction = self._by_code.get(code)
        if jurisdiction is None:
            return ()
        return jurisdiction.law_records

    def get_jurisdiction(self, code: str) -> Jurisdiction | None:
        return self._by_code.get(code)

    def find_by_name(self, name: str) -> Jurisdiction | None:
        """Case-insensitive lookup by display name (e.g. 'new york')."""
        wanted = name.strip().lower()
        for jurisdiction in self._by_code.values():
            if jurisdiction.name.lower() == wanted:
                return jurisdiction
        return None

    def by_region(self, region: str) -> list[Jurisdiction]:
        return [j for j in self._by_code.values() if j.region == region]

    def codes(self) -> list[str]:
        return list(self._by_code)

    def jurisdictions(self) -> list[Jurisdiction]:
        return list(self._by_code.values())

    def record_count(self) -> int:
        return sum(len(j.law_records) for j in self._by_code.values())

    def search(
        self,
        query: str,
        codes: Iterable[str] | None = None,
        categories: Iterable[LawCategory] | None = None,
    ) -> list[tuple[str, LawRecord]]:
        """Case-insensitive substring search over title, description and value.

        An empty query matches every record in the filtered set. Results are in
        catalog order.
        """
        needle = query.strip().lower()
        wanted_codes = set(codes) if codes is not None else None
        wanted_categories = set(categories) if categories is not None else None

        results: list[tuple[str, LawRecord]] = []
        for code, jurisdiction in self._by_code.items():
            if wanted_codes is not None and code not in wanted_codes:
                continue
            for record in jurisdiction.law_records:
                if wanted_categories is not None and record.category not in wanted_categories:
                    continue
                if needle and not (
                    needle in record.title.lower()
                    or needle in record.description.lower()
                    or needle in record.value.lower()
                ):
                    continue
                results.append((code, record))
        return results


@lru_cache
def get_law_catalog() -> LawCatalog:
    """Return the process-wide catalog built from the configured data file."""
    return LawCatalog.from_file(get_settings().law_catalog_path)
