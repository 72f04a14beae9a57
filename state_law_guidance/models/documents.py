from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from state_law_guidance.constants import DEFAULT_LINE_HEIGHT


class DocumentTemplateKind(str, Enum):
    """Supported document templates; the value is the display title."""

    # Tenant documents
    LEASE_AGREEMENT = "Lease Agreement"
    RENT_RECEIPT = "Rent Receipt"
    MAINTENANCE_REQUEST = "Maintenance Request"
    NOTICE_TO_VACATE = "Notice to Vacate"
    SECURITY_DEPOSIT_CLAIM = "Security Deposit Claim"
    RENT_INCREASE_NOTICE = "Rent Increase Notice"
    ROOMMATE_AGREEMENT = "Roommate Agreement"
    PET_ADDENDUM = "Pet Addendum"
    SUBLEASE_AGREEMENT = "Sublease Agreement"
    MOVE_IN_CHECKLIST = "Move-In Checklist"

    # Employment documents
    EMPLOYMENT_VERIFICATION = "Employment Verification"
    INCOME_VERIFICATION = "Income Verification"
    W4_FORM = "W-4 Tax Form"

    # Tax documents
    RENTAL_INCOME_REPORT = "Rental Income Report"
    PROPERTY_TAX_ESTIMATE = "Property Tax Estimate"

    # Other legal documents
    POWER_OF_ATTORNEY = "Power of Attorney"
    LEASE_TERMINATION = "Lease Termination"
    REPAIR_REQUEST = "Repair Request"

    @property
    def identifier(self) -> str:
        """camelCase identifier used by form clients, e.g. ``rentReceipt``."""
        head, *rest = self.name.lower().split("_")
        return head + "".join(part.capitalize() for part in rest)


class BlockStyle(str, Enum):
    HEADING = "heading"
    NORMAL = "normal"


class FieldSpec(BaseModel):
    """A named slot in a template and the text shown when it is left empty."""

    model_config = ConfigDict(frozen=True)

    name: str
    placeholder_text: str = Field(
        "", description="Bracketed default, e.g. '[Tenant Name]'; empty for optional slots"
    )


class TemplateLayout(BaseModel):
    """Fixed line layout of one template kind."""

    model_config = ConfigDict(frozen=True)

    kind: DocumentTemplateKind
    lines: tuple[str, ...] = Field(..., description="Raw lines with {fieldName} slots")
    headings: frozenset[str] = Field(
        default_factory=frozenset, description="Exact raw lines rendered as section headers"
    )
    line_height: int = Field(
        DEFAULT_LINE_HEIGHT, gt=0, description="Layout units consumed by a non-empty line"
    )
    lead_line_height: int | None = Field(
        None, gt=0, description="Advance after the first line when it differs from line_height"
    )


class DocumentBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    style: BlockStyle = BlockStyle.NORMAL
    page: int = Field(1, ge=1)


class RenderedDocument(BaseModel):
    """Output of a single render call. Owned by the caller once produced."""

    model_config = ConfigDict(frozen=True)

    title: str
    template_kind: DocumentTemplateKind
    jurisdiction_name: str
    created_at: datetime
    body_blocks: tuple[DocumentBlock, ...] = ()

    @field_validator("template_kind", mode="before")
    @classmethod
    def validate_kind(cls, v):
        if isinstance(v, str) and not isinstance(v, DocumentTemplateKind):
            for kind in DocumentTemplateKind:
                if v in (kind.name, kind.value, kind.identifier):
                    return kind
            raise ValueError(f"Invalid template kind '{v}'")
        return v

    @property
    def page_count(self) -> int:
        return max((block.page for block in self.body_blocks), default=1)

    def pages(self) -> list[list[DocumentBlock]]:
        """Group body blocks by page, preserving order."""
        grouped: list[list[DocumentBlock]] = [[] for _ in range(self.page_count)]
        for block in self.body_blocks:
            grouped[block.page - 1].append(block)
        return grouped

    def to_text(self) -> str:
        """Plain-text export; pages are separated by a form feed."""
        return "\n\f\n".join(
            "\n".join(block.text for block in page) for page in self.pages()
        )

    def to_bytes(self, encoding: str = "utf-8") -> bytes:
        return self.to_text().encode(encoding)
