"""
Short human-readable text for state-change notifications.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import NamedTuple

from state_law_guidance.constants import (
    NOTIFICATION_CALL_TO_ACTION,
    NOTIFICATION_CATEGORY_STATE_CHANGE,
    NOTIFICATION_FALLBACK,
    NOTIFICATION_TITLE,
    UNKNOWN_HOME_JURISDICTION,
)
from state_law_guidance.models.laws import LawCategory, LawDifference, NotificationContent
from state_law_guidance.services.diff_engine import DiffEngine

logger = logging.getLogger(__name__)


class TitleRule(NamedTuple):
    """Template used when `substring` occurs in the law title (case-sensitive)."""

    substring: str
    template: str


# Rules are tried in order; the first match wins, otherwise the category's generic line
TITLE_RULES: dict[LawCategory, tuple[TitleRule, ...]] = {
    LawCategory.TENANT_RIGHTS: (
        TitleRule("Security Deposit", "⚠️ Security deposit limits: {to_value} (was {from_value})"),
        TitleRule("Rent Control", "🏠 Rent control: {to_value}"),
    ),
    LawCategory.TRAFFIC: (TitleRule("Hands-Free", "🚗 Phone use: {to_value}"),),
    LawCategory.EMPLOYMENT: (
        TitleRule("Minimum Wage", "💰 Minimum wage: {to_value} (was {from_value})"),
    ),
    LawCategory.TAXES: (TitleRule("Income Tax", "💸 State income tax: {to_value}"),),
    LawCategory.CONSUMER: (),
}

GENERIC_TEMPLATES: dict[LawCategory, str] = {
    LawCategory.TENANT_RIGHTS: "🏠 {title}: {to_value}",
    LawCategory.TRAFFIC: "🚗 {title}: {to_value}",
    LawCategory.EMPLOYMENT: "💼 {title}: {to_value}",
    LawCategory.TAXES: "💸 {title}: {to_value}",
    LawCategory.CONSUMER: "🛒 {title}: {to_value}",
}


def format_line(difference: LawDifference) -> str:
    """Format one difference as a single notification line."""
    template = GENERIC_TEMPLATES[difference.category]
    for rule in TITLE_RULES[difference.category]:
        if rule.substring in difference.law_title:
            template = rule.template
            break
    return template.format(
        title=difference.law_title,
        from_value=difference.from_value,
        to_value=difference.to_value,
    )


class NotificationTextBuilder:
    def __init__(self, max_lines: int = 2):
        self.max_lines = max_lines

    def build_body(
        self,
        differences: Sequence[LawDifference],
        to_jurisdiction_name: str,
        previous_jurisdiction_name: str | None = None,
    ) -> str:
        """Notification body for arriving in `to_jurisdiction_name`.

        Shows at most `max_lines` differences plus a call to action, or a
        fallback sentence when there is nothing worth flagging.
        """
        if not differences:
            return NOTIFICATION_FALLBACK.format(
                from_name=previous_jurisdiction_name or UNKNOWN_HOME_JURISDICTION,
                to_name=to_jurisdiction_name,
            )

        lines = [format_line(d) for d in differences[: self.max_lines]]
        lines.append(NOTIFICATION_CALL_TO_ACTION.format(to_name=to_jurisdiction_name))
        return "\n".join(lines)


class StateChangeNotifier:
    """Builds the full notification shown when the user enters a new state."""

    def __init__(
        self,
        engine: DiffEngine,
        builder: NotificationTextBuilder,
        critical_limit: int = 3,
    ):
        self.engine = engine
        self.builder = builder
        self.critical_limit = critical_limit

    def build_state_change_notification(
        self, from_code: str, to_code: str
    ) -> NotificationContent:
        catalog = self.engine.catalog
        to_jurisdiction = catalog.get_jurisdiction(to_code)
        from_jurisdiction = catalog.get_jurisdiction(from_code)
        to_name = to_jurisdiction.name if to_jurisdiction else to_code
        from_name = from_jurisdiction.name if from_jurisdiction else (from_code or None)

        differences = self.engine.critical_differences(
            from_code, to_code, limit=self.critical_limit
        )
        logger.info(
            f"State change {from_code or '-'} -> {to_code}: "
            f"{len(differences)} notable differences"
        )
        return NotificationContent(
            title=NOTIFICATION_TITLE.format(to_name=to_name),
            body=self.builder.build_body(differences, to_name, from_name),
            category_identifier=NOTIFICATION_CATEGORY_STATE_CHANGE,
            user_info={"state": to_code},
        )
