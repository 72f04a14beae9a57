import os
import tempfile
from datetime import datetime

# Must be set before state_law_guidance.config caches its settings
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "state_law_guidance_test_logs"))

import pytest

from state_law_guidance.config import get_settings
from state_law_guidance.models.laws import Jurisdiction, LawCategory, LawRecord
from state_law_guidance.services.diff_engine import DiffEngine
from state_law_guidance.services.document_renderer import DocumentRenderer
from state_law_guidance.services.law_catalog import LawCatalog
from state_law_guidance.services.notification_text import (
    NotificationTextBuilder,
    StateChangeNotifier,
)
from state_law_guidance.services.template_registry import TemplateRegistry


@pytest.fixture(scope="session")
def catalog():
    """The bundled law catalog, loaded once per session."""
    return LawCatalog.from_file(get_settings().law_catalog_path)


@pytest.fixture(scope="session")
def engine(catalog):
    return DiffEngine(catalog)


@pytest.fixture
def notifier(engine):
    return StateChangeNotifier(engine, NotificationTextBuilder(max_lines=2), critical_limit=3)


@pytest.fixture(scope="session")
def registry():
    return TemplateRegistry()


@pytest.fixture(scope="session")
def renderer(registry):
    return DocumentRenderer(registry)


@pytest.fixture
def generated_at():
    return datetime(2026, 10, 18, 9, 30)


def make_record(category, title, value, importance="MEDIUM", description=""):
    return LawRecord(
        category=category,
        title=title,
        value=value,
        importance=importance,
        description=description or f"{title} rule",
    )


@pytest.fixture
def small_catalog():
    """Two fictional jurisdictions with known overlaps and gaps.

    Matched titles with different values: Deposit Cap, Notice Period, Wage Floor,
    Texting, Sales Tax. "Pet Fees" and "Lane Splitting" exist on one side only;
    "Seatbelt" has equal values.
    """
    north = Jurisdiction(
        code="NT",
        name="Northland",
        region="Northeast",
        law_records=(
            make_record(LawCategory.TENANT_RIGHTS, "Deposit Cap", "1 month", "HIGH"),
            make_record(LawCategory.TENANT_RIGHTS, "Notice Period", "30 days", "MEDIUM"),
            make_record(LawCategory.TENANT_RIGHTS, "Pet Fees", "Capped at $300", "LOW"),
            make_record(LawCategory.TRAFFIC, "Texting", "Banned", "MEDIUM"),
            make_record(LawCategory.TRAFFIC, "Seatbelt", "Required", "HIGH"),
            make_record(LawCategory.EMPLOYMENT, "Wage Floor", "$15.00/hour", "CRITICAL"),
            make_record(LawCategory.TAXES, "Sales Tax", "5%", "LOW"),
        ),
    )
    south = Jurisdiction(
        code="ST",
        name="Southland",
        region="Southeast",
        law_records=(
            make_record(LawCategory.TENANT_RIGHTS, "Notice Period", "60 days", "HIGH"),
            make_record(LawCategory.TENANT_RIGHTS, "Deposit Cap", "No limit", "MEDIUM"),
            make_record(LawCategory.TRAFFIC, "Seatbelt", "Required", "HIGH"),
            make_record(LawCategory.TRAFFIC, "Texting", "Allowed", "LOW"),
            make_record(LawCategory.TRAFFIC, "Lane Splitting", "Legal", "LOW"),
            make_record(LawCategory.EMPLOYMENT, "Wage Floor", "$7.25/hour", "CRITICAL"),
            make_record(LawCategory.TAXES, "Sales Tax", "7%", "MEDIUM"),
        ),
    )
    return LawCatalog([north, south], version="test")
