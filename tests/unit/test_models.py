import pytest
from pydantic import ValidationError

from state_law_guidance.models.documents import (
    BlockStyle,
    DocumentBlock,
    DocumentTemplateKind,
    RenderedDocument,
)
from state_law_guidance.models.laws import Importance, Jurisdiction, LawCategory, LawRecord


class TestLawCategory:
    def test_parse_name_and_value(self):
        assert LawCategory.parse("TRAFFIC") == LawCategory.TRAFFIC
        assert LawCategory.parse("Traffic Laws") == LawCategory.TRAFFIC

    def test_parse_invalid(self):
        with pytest.raises(ValueError, match="Invalid category"):
            LawCategory.parse("Parking")

    def test_declaration_order(self):
        assert list(LawCategory) == [
            LawCategory.TENANT_RIGHTS,
            LawCategory.TRAFFIC,
            LawCategory.EMPLOYMENT,
            LawCategory.TAXES,
            LawCategory.CONSUMER,
        ]


class TestImportance:
    def test_total_order(self):
        assert Importance.LOW < Importance.MEDIUM < Importance.HIGH < Importance.CRITICAL

    @pytest.mark.parametrize("raw", ["HIGH", "high", 3, Importance.HIGH])
    def test_parse(self, raw):
        assert Importance.parse(raw) == Importance.HIGH


class TestLawRecord:
    def test_validators(self):
        record = LawRecord(
            category="EMPLOYMENT",
            title="Minimum Wage",
            value="$16.00/hour",
            importance="critical",
            effective_date="2024-01-01T00:00:00Z",
        )
        assert record.category == LawCategory.EMPLOYMENT
        assert record.importance == Importance.CRITICAL
        assert record.effective_date.year == 2024
        assert record.key == (LawCategory.EMPLOYMENT, "Minimum Wage")

    def test_frozen(self):
        record = LawRecord(category="TAXES", title="Sales Tax", value="5%", importance="LOW")
        with pytest.raises(ValidationError):
            record.value = "6%"

    def test_bad_date(self):
        with pytest.raises(ValidationError):
            LawRecord(
                category="TAXES",
                title="Sales Tax",
                value="5%",
                importance="LOW",
                effective_date="last tuesday",
            )


class TestJurisdiction:
    def _record(self, category, title, value):
        return LawRecord(category=category, title=title, value=value, importance="HIGH")

    def test_repeated_category_and_title_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate law record"):
            Jurisdiction(
                code="AA",
                name="Alpha",
                laws=[
                    self._record("EMPLOYMENT", "Minimum Wage", "$10"),
                    self._record("EMPLOYMENT", "Minimum Wage", "$12"),
                ],
            )

    def test_records_keyed_by_category_and_title(self):
        jurisdiction = Jurisdiction(
            code="AA",
            name="Alpha",
            law_records=(
                self._record("TAXES", "Fees", "1"),
                self._record("CONSUMER", "Fees", "2"),
            ),
        )
        assert [r.key for r in jurisdiction.law_records] == [
            (LawCategory.TAXES, "Fees"),
            (LawCategory.CONSUMER, "Fees"),
        ]


class TestRenderedDocument:
    def test_kind_accepts_name(self, generated_at):
        document = RenderedDocument(
            title="Pet Addendum",
            template_kind="PET_ADDENDUM",
            jurisdiction_name="Ohio",
            created_at=generated_at,
        )
        assert document.template_kind == DocumentTemplateKind.PET_ADDENDUM
        assert document.page_count == 1
        assert document.to_text() == ""

    def test_pages_group_blocks(self, generated_at):
        document = RenderedDocument(
            title="Pet Addendum",
            template_kind=DocumentTemplateKind.PET_ADDENDUM,
            jurisdiction_name="Ohio",
            created_at=generated_at,
            body_blocks=(
                DocumentBlock(text="A", style=BlockStyle.HEADING, page=1),
                DocumentBlock(text="B", page=1),
                DocumentBlock(text="C", page=2),
            ),
        )
        assert [[b.text for b in page] for page in document.pages()] == [["A", "B"], ["C"]]
        assert document.to_text() == "A\nB\n\f\nC"


@pytest.mark.parametrize(
    "kind,identifier",
    [
        (DocumentTemplateKind.RENT_RECEIPT, "rentReceipt"),
        (DocumentTemplateKind.MOVE_IN_CHECKLIST, "moveInChecklist"),
        (DocumentTemplateKind.LEASE_AGREEMENT, "leaseAgreement"),
    ],
)
def test_template_identifiers(kind, identifier):
    assert kind.identifier == identifier
