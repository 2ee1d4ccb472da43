from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from wfsapi.config import ServiceConfig
from wfsapi.documents import LandingPage
from wfsapi.endpoints.dependencies import (
    base_url,
    get_format_registry,
    get_service_config,
    negotiate_format,
    render_response,
)
from wfsapi.formats import DocumentKind, FormatRegistry
from wfsapi.links import LinkBuilder

router = APIRouter(tags=["Landing Page"])


@router.get("/")
@router.get("/landing")
def get_landing_page(
    request: Request,
    registry: FormatRegistry = Depends(get_format_registry),
    config: ServiceConfig = Depends(get_service_config),
) -> Response:
    output_format = negotiate_format(request, DocumentKind.LANDING_PAGE, registry)
    page = LandingPage(LinkBuilder(base_url(request), registry), output_format, config)
    return render_response(
        page.to_dict(),
        output_format,
        "LandingPage",
        template="landing_page.html",
        page=page,
    )
