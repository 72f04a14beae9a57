"""
API request/response schemas for the State Law Guidance service.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from state_law_guidance.models.documents import DocumentBlock, FieldSpec
from state_law_guidance.models.laws import Jurisdiction, LawDifference, LawRecord


class JurisdictionSummary(BaseModel):
    code: str
    name: str
    capital: str | None = None
    region: str | None = None
    law_count: int = 0

    @classmethod
    def from_jurisdiction(cls, jurisdiction: Jurisdiction) -> "JurisdictionSummary":
        return cls(
            code=jurisdiction.code,
            name=jurisdiction.name,
            capital=jurisdiction.capital,
            region=jurisdiction.region,
            law_count=len(jurisdiction.law_records),
        )


class JurisdictionListResponse(BaseModel):
    catalog_version: str
    jurisdictions: list[JurisdictionSummary]


class JurisdictionLawsResponse(BaseModel):
    code: str
    laws: list[LawRecord]


class LawSearchHit(BaseModel):
    jurisdiction: str
    law: LawRecord


class LawSearchResponse(BaseModel):
    query: str
    total: int
    results: list[LawSearchHit]


class DifferencesResponse(BaseModel):
    """Ranked differences, highest importance first."""

    from_code: str
    to_code: str
    total: int
    differences: list[LawDifference]


class NotificationResponse(BaseModel):
    title: str
    body: str
    category_identifier: str
    user_info: dict[str, str]


class TemplateSummary(BaseModel):
    kind: str
    identifier: str
    title: str
    field_count: int


class TemplateDetail(BaseModel):
    kind: str
    identifier: str
    title: str
    fields: list[FieldSpec]


class RenderDocumentRequest(BaseModel):
    """Form input for a document; keys that are not fields of the template are ignored."""

    field_values: dict[str, str] = Field(default_factory=dict)
    jurisdiction_name: str = Field(..., description="Shown on the State line; may be empty")


class RenderDocumentResponse(BaseModel):
    title: str
    template_kind: str
    jurisdiction_name: str
    created_at: datetime
    page_count: int
    ignored_fields: list[str] = Field(default_factory=list)
    body_blocks: list[DocumentBlock]
