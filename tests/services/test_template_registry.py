import pytest

from state_law_guidance.document_templates import TEMPLATE_LAYOUTS, TEMPLATE_PLACEHOLDERS
from state_law_guidance.domain.errors import UnknownTemplateKind, ValidationFailed
from state_law_guidance.models.documents import DocumentTemplateKind
from state_law_guidance.services.template_registry import field_names


def test_every_kind_has_a_layout(registry):
    assert registry.kinds() == list(DocumentTemplateKind)
    assert len(registry.kinds()) == 18


@pytest.mark.parametrize("kind", list(DocumentTemplateKind))
def test_layout_table_is_consistent(kind):
    layout = TEMPLATE_LAYOUTS[kind]
    assert layout.kind == kind
    assert layout.headings <= set(layout.lines)
    assert layout.line_height in (18, 20, 25)
    names = {name for line in layout.lines for name in field_names(line)}
    assert names == set(TEMPLATE_PLACEHOLDERS[kind])


def test_field_names_in_order():
    assert field_names("Due Date 1: {dueDate1}  Amount: ${payment1}") == ["dueDate1", "payment1"]
    assert field_names("Photos taken: [ ] Yes  [ ] No") == []


def test_rent_receipt_fields(registry):
    fields = registry.fields_for(DocumentTemplateKind.RENT_RECEIPT)
    assert [f.name for f in fields] == [
        "receiptNumber",
        "tenantName",
        "propertyAddress",
        "amount",
        "period",
        "paymentMethod",
        "dateReceived",
    ]
    assert fields[1].placeholder_text == "[Tenant Name]"


def test_repeated_field_listed_once(registry):
    names = [f.name for f in registry.fields_for(DocumentTemplateKind.NOTICE_TO_VACATE)]
    assert names.count("landlordName") == 1
    assert names.count("tenantName") == 1


def test_optional_fields_have_empty_placeholder(registry):
    placeholders = registry.placeholders_for(DocumentTemplateKind.ROOMMATE_AGREEMENT)
    assert placeholders["roommate3"] == ""
    assert placeholders["roommate1"] == "[Name]"


class TestResolveKind:
    @pytest.mark.parametrize(
        "value",
        ["RENT_RECEIPT", "Rent Receipt", "rentReceipt", "rent receipt", "rentreceipt"],
    )
    def test_accepted_spellings(self, registry, value):
        assert registry.resolve_kind(value) == DocumentTemplateKind.RENT_RECEIPT

    def test_w4_identifier(self, registry):
        assert DocumentTemplateKind.W4_FORM.identifier == "w4Form"
        assert registry.resolve_kind("w4Form") == DocumentTemplateKind.W4_FORM
        assert registry.resolve_kind("W-4 Tax Form") == DocumentTemplateKind.W4_FORM

    def test_kind_passes_through(self, registry):
        kind = DocumentTemplateKind.PET_ADDENDUM
        assert registry.resolve_kind(kind) is kind

    def test_unknown_kind(self, registry):
        with pytest.raises(UnknownTemplateKind):
            registry.resolve_kind("rentalApplication")

    def test_unknown_kind_is_a_validation_failure(self, registry):
        with pytest.raises(ValidationFailed):
            registry.resolve_kind("")


def test_partition_field_values(registry):
    accepted, ignored = registry.partition_field_values(
        DocumentTemplateKind.RENT_RECEIPT,
        {"tenantName": "Jane Doe", "amount": "1200", "favoriteColor": "blue"},
    )
    assert accepted == {"tenantName": "Jane Doe", "amount": "1200"}
    assert ignored == {"favoriteColor": "blue"}
