import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from wfsapi.catalog import CatalogView
from wfsapi.config import ServiceConfig
from wfsapi.endpoints.dependencies import (
    base_url,
    get_catalog,
    get_format_registry,
    get_service_config,
    negotiate_format,
    render_response,
)
from wfsapi.formats import DocumentKind, FormatRegistry
from wfsapi.openapi import ApiDescriptionBuilder

router = APIRouter(tags=["API"])
logger = logging.getLogger(__name__)


@router.get("/api")
def get_api_description(
    request: Request,
    registry: FormatRegistry = Depends(get_format_registry),
    catalog: CatalogView = Depends(get_catalog),
    config: ServiceConfig = Depends(get_service_config),
) -> Response:
    output_format = negotiate_format(request, DocumentKind.API, registry)
    api = ApiDescriptionBuilder(base_url(request), registry).build(catalog, config)
    logger.debug("Serving API description as %s", output_format)
    return render_response(api, output_format, "OpenAPI", template="api.html", api=api)
