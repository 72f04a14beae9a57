"""
Business logic constants for the State Law Guidance system.

This module contains constants that define the behavior and rules of the system,
as opposed to runtime configuration (which lives in config.py).
"""

from state_law_guidance.models.laws import Importance

# Importance levels that qualify a difference for a state-change notification
NOTIFIABLE_IMPORTANCE: frozenset[Importance] = frozenset({Importance.HIGH, Importance.CRITICAL})

# Notification copy
NOTIFICATION_CATEGORY_STATE_CHANGE = "STATE_CHANGE"
NOTIFICATION_TITLE = "Welcome to {to_name}!"
NOTIFICATION_CALL_TO_ACTION = "Tap to see all law differences in {to_name}."
NOTIFICATION_FALLBACK = (
    "No major law differences from {from_name} were found. Tap to explore laws in {to_name}."
)
UNKNOWN_HOME_JURISDICTION = "your home state"

# Document layout, in page units (a US Letter page is 612 x 792)
PAGE_TOP_MARGIN = 50
PAGE_BREAK_THRESHOLD = 700  # start a new page once the running offset exceeds this
TITLE_LINE_HEIGHT = 29
TITLE_SPACING = 20
DATE_LINE_ADVANCE = 30
JURISDICTION_LINE_ADVANCE = 40
BLANK_LINE_HEIGHT = 10
DEFAULT_LINE_HEIGHT = 20

DOCUMENT_DISCLAIMER = (
    "This document is for informational purposes only. "
    "Consult with a legal professional for advice."
)
DOCUMENT_FOOTER = "Generated on {date}"
