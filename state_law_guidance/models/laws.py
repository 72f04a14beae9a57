from datetime import datetime
from enum import Enum, IntEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LawCategory(str, Enum):
    """Categories of law compared between jurisdictions.

    Declaration order is the canonical order used when diffing.
    """

    TENANT_RIGHTS = "Tenant Rights"
    TRAFFIC = "Traffic Laws"
    EMPLOYMENT = "Employment"
    TAXES = "Taxes"
    CONSUMER = "Consumer Protection"

    @classmethod
    def parse(cls, v: "str | LawCategory") -> "LawCategory":
        """Resolve a category from its member name (``TAXES``) or value (``Taxes``)."""
        if isinstance(v, cls):
            return v
        try:
            return cls[v]
        except KeyError:
            try:
                return cls(v)
            except ValueError:
                raise ValueError(
                    f"Invalid category '{v}'. Allowed: {[e.name for e in cls]} or {[e.value for e in cls]}"
                )


class Importance(IntEnum):
    """Ordinal severity used to rank differences."""

    LOW = 1
    MEDIUM = 2
    HIGH = 3
    CRITICAL = 4

    @classmethod
    def parse(cls, v: "int | str | Importance") -> "Importance":
        if isinstance(v, cls):
            return v
        if isinstance(v, str):
            try:
                return cls[v.upper()]
            except KeyError:
                raise ValueError(
                    f"Invalid importance '{v}'. Allowed: {[e.name for e in cls]}"
                )
        return cls(v)


class LawRecord(BaseModel):
    """One rule about a jurisdiction in a given category."""

    model_config = ConfigDict(frozen=True)

    category: LawCategory
    title: str = Field(..., description="Law topic; joins records across jurisdictions")
    description: str = ""
    value: str = Field(..., description="Free-text rule content, e.g. '30 days' or '$15/hour'")
    importance: Importance
    effective_date: datetime | None = None

    @field_validator("category", mode="before")
    @classmethod
    def validate_category(cls, v):
        if isinstance(v, str):
            return LawCategory.parse(v)
        return v

    @field_validator("importance", mode="before")
    @classmethod
    def validate_importance(cls, v):
        if isinstance(v, (str, int)):
            return Importance.parse(v)
        return v

    @field_validator("effective_date", mode="before")
    @classmethod
    def validate_datetime(cls, v):
        if isinstance(v, str):
            try:
                return datetime.fromisoformat(v.replace("Z", "+00:00"))
            except ValueError:
                raise ValueError(f"Invalid datetime format: {v}")
        return v

    @property
    def key(self) -> tuple[LawCategory, str]:
        """Identity used for cross-jurisdiction matching."""
        return (self.category, self.title)


class Jurisdiction(BaseModel):
    """A state (or equivalent region) and its law records."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    code: str = Field(..., min_length=1, description="Short unique identifier, e.g. 'CA'")
    name: str
    capital: str | None = None
    region: str | None = Field(
        None, description="Northeast, Southeast, Midwest, Southwest or West"
    )
    law_records: tuple[LawRecord, ...] = Field(default=(), alias="laws")

    @field_validator("law_records")
    @classmethod
    def validate_unique_keys(cls, v: tuple[LawRecord, ...]) -> tuple[LawRecord, ...]:
        seen: set[tuple[LawCategory, str]] = set()
        for record in v:
            if record.key in seen:
                raise ValueError(
                    f"Duplicate law record: {record.category.name} / {record.title!r}"
                )
            seen.add(record.key)
        return v


class LawDifference(BaseModel):
    """A matched pair of law records whose values differ."""

    model_config = ConfigDict(frozen=True)

    category: LawCategory
    law_title: str
    from_jurisdiction: str
    from_value: str
    to_jurisdiction: str
    to_value: str
    description: str
    importance: Importance

    @property
    def summary_text(self) -> str:
        return (
            f"{self.law_title}: {self.from_jurisdiction}: {self.from_value} "
            f"→ {self.to_jurisdiction}: {self.to_value}"
        )


class NotificationContent(BaseModel):
    """Payload handed to the notification collaborator for delivery."""

    model_config = ConfigDict(frozen=True)

    title: str
    body: str
    category_identifier: str = "STATE_CHANGE"
    user_info: dict[str, str] = Field(default_factory=dict)
