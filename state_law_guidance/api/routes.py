"""
API routes for the State Law Guidance service.
"""

import logging
from datetime import datetime

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import PlainTextResponse

from state_law_guidance.api.schemas import (
    DifferencesResponse,
    JurisdictionLawsResponse,
    JurisdictionListResponse,
    JurisdictionSummary,
    LawSearchHit,
    LawSearchResponse,
    NotificationResponse,
    RenderDocumentRequest,
    RenderDocumentResponse,
    TemplateDetail,
    TemplateSummary,
)
from state_law_guidance.domain.errors import ResourceNotFound, ValidationFailed
from state_law_guidance.models.documents import DocumentTemplateKind
from state_law_guidance.models.laws import LawCategory
from state_law_guidance.services.diff_engine import DiffEngine
from state_law_guidance.services.document_renderer import DocumentRenderer
from state_law_guidance.services.law_catalog import LawCatalog
from state_law_guidance.services.notification_text import StateChangeNotifier
from state_law_guidance.services.template_registry import TemplateRegistry

router = APIRouter()

logger = logging.getLogger(__name__)


def get_catalog(request: Request) -> LawCatalog:
    return request.app.state.catalog


def get_engine(request: Request) -> DiffEngine:
    return request.app.state.diff_engine


def get_notifier(request: Request) -> StateChangeNotifier:
    return request.app.state.notifier


def get_registry(request: Request) -> TemplateRegistry:
    return request.app.state.template_registry


def get_renderer(request: Request) -> DocumentRenderer:
    return request.app.state.renderer


def parse_categories(raw: list[str] | None) -> list[LawCategory] | None:
    if not raw:
        return None
    try:
        return [LawCategory.parse(value) for value in raw]
    except ValueError as e:
        raise ValidationFailed(str(e)) from e


def _template_summary(kind: DocumentTemplateKind, registry: TemplateRegistry) -> TemplateSummary:
    return TemplateSummary(
        kind=kind.name,
        identifier=kind.identifier,
        title=kind.value,
        field_count=len(registry.fields_for(kind)),
    )


@router.get("/api/jurisdictions")
async def list_jurisdictions(
    region: str | None = None, catalog: LawCatalog = Depends(get_catalog)
) -> JurisdictionListResponse:
    jurisdictions = catalog.by_region(region) if region else catalog.jurisdictions()
    return JurisdictionListResponse(
        catalog_version=catalog.version,
        jurisdictions=[JurisdictionSummary.from_jurisdiction(j) for j in jurisdictions],
    )


@router.get("/api/jurisdictions/{code}")
async def get_jurisdiction(
    code: str, catalog: LawCatalog = Depends(get_catalog)
) -> JurisdictionSummary:
    jurisdiction = catalog.get_jurisdiction(code)
    if jurisdiction is None:
        raise ResourceNotFound(f"Unknown jurisdiction: {code}")
    return JurisdictionSummary.from_jurisdiction(jurisdiction)


@router.get("/api/jurisdictions/{code}/laws")
async def get_jurisdiction_laws(
    code: str,
    category: list[str] | None = Query(None),
    catalog: LawCatalog = Depends(get_catalog),
) -> JurisdictionLawsResponse:
    """Law records for a jurisdiction; unknown codes yield an empty list."""
    categories = parse_categories(category)
    records = catalog.get_records(code)
    if categories is not None:
        records = tuple(r for r in records if r.category in categories)
    return JurisdictionLawsResponse(code=code, laws=list(records))


@router.get("/api/laws/search")
async def search_laws(
    q: str = "",
    jurisdiction: list[str] | None = Query(None),
    category: list[str] | None = Query(None),
    catalog: LawCatalog = Depends(get_catalog),
) -> LawSearchResponse:
    hits = catalog.search(q, codes=jurisdiction or None, categories=parse_categories(category))
    return LawSearchResponse(
        query=q,
        total=len(hits),
        results=[LawSearchHit(jurisdiction=code, law=record) for code, record in hits],
    )


@router.get("/api/differences")
async def get_differences(
    from_code: str,
    to_code: str,
    category: list[str] | None = Query(None),
    engine: DiffEngine = Depends(get_engine),
) -> DifferencesResponse:
    differences = engine.diff(from_code, to_code, categories=parse_categories(category))
    return DifferencesResponse(
        from_code=from_code, to_code=to_code, total=len(differences), differences=differences
    )


@router.get("/api/differences/critical")
async def get_critical_differences(
    request: Request,
    from_code: str,
    to_code: str,
    limit: int | None = Query(None, ge=0),
    engine: DiffEngine = Depends(get_engine),
) -> DifferencesResponse:
    if limit is None:
        limit = request.app.state.settings.critical_difference_limit
    differences = engine.critical_differences(from_code, to_code, limit=limit)
    return DifferencesResponse(
        from_code=from_code, to_code=to_code, total=len(differences), differences=differences
    )


@router.get("/api/notifications/state-change")
async def get_state_change_notification(
    to_code: str,
    from_code: str = "",
    notifier: StateChangeNotifier = Depends(get_notifier),
) -> NotificationResponse:
    content = notifier.build_state_change_notification(from_code, to_code)
    return NotificationResponse(**content.model_dump())


@router.get("/api/templates")
async def list_templates(registry: TemplateRegistry = Depends(get_registry)) -> list[TemplateSummary]:
    return [_template_summary(kind, registry) for kind in registry.kinds()]


@router.get("/api/templates/{kind}")
async def get_template(kind: str, registry: TemplateRegistry = Depends(get_registry)) -> TemplateDetail:
    resolved = registry.resolve_kind(kind)
    return TemplateDetail(
        kind=resolved.name,
        identifier=resolved.identifier,
        title=resolved.value,
        fields=list(registry.fields_for(resolved)),
    )


@router.post("/api/documents/{kind}", response_model=None)
async def render_document(
    kind: str,
    payload: RenderDocumentRequest,
    format: str = Query("json", pattern="^(json|text)$"),
    registry: TemplateRegistry = Depends(get_registry),
    renderer: DocumentRenderer = Depends(get_renderer),
) -> RenderDocumentResponse | PlainTextResponse:
    """Fill a template with form values; `format=text` returns the plain-text export."""
    resolved = registry.resolve_kind(kind)
    _, ignored = registry.partition_field_values(resolved, payload.field_values)
    document = renderer.render(
        resolved,
        payload.field_values,
        jurisdiction_name=payload.jurisdiction_name,
        generated_at=datetime.now(),
    )
    logger.info(
        f"Rendered {resolved.name} ({document.page_count} page(s), {len(ignored)} ignored fields)"
    )

    if format == "text":
        return PlainTextResponse(document.to_text())
    return RenderDocumentResponse(
        title=document.title,
        template_kind=resolved.name,
        jurisdiction_name=document.jurisdiction_name,
        created_at=document.created_at,
        page_count=document.page_count,
        ignored_fields=sorted(ignored),
        body_blocks=list(document.body_blocks),
    )
