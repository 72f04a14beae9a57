"""
State Law Guidance
Compares laws between a user's home state and the state they are in, and fills
legal document templates from form input.
"""

__version__ = "0.1.0"

from state_law_guidance.models.laws import (
    Importance,
    Jurisdiction,
    LawCategory,
    LawDifference,
    LawRecord,
    NotificationContent,
)
from state_law_guidance.models.documents import (
    DocumentTemplateKind,
    FieldSpec,
    RenderedDocument,
)
from state_law_guidance.services.law_catalog import LawCatalog, get_law_catalog
from state_law_guidance.services.diff_engine import DiffEngine, values_differ
from state_law_guidance.services.notification_text import (
    NotificationTextBuilder,
    StateChangeNotifier,
)
from state_law_guidance.services.template_registry import TemplateRegistry
from state_law_guidance.services.document_renderer import DocumentRenderer
from state_law_guidance.utils.logging import setup_logging

__all__ = [
    'Importance',
    'Jurisdiction',
    'LawCategory',
    'LawDifference',
    'LawRecord',
    'NotificationContent',
    'DocumentTemplateKind',
    'FieldSpec',
    'RenderedDocument',
    'LawCatalog',
    'get_law_catalog',
    'DiffEngine',
    'values_differ',
    'NotificationTextBuilder',
    'StateChangeNotifier',
    'TemplateRegistry',
    'DocumentRenderer',
    'setup_logging',
]
