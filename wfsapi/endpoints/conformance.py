from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from wfsapi.documents import ConformanceDocument
from wfsapi.endpoints.dependencies import base_url, get_format_registry, negotiate_format, render_response
from wfsapi.formats import DocumentKind, FormatRegistry
from wfsapi.links import LinkBuilder

router = APIRouter(tags=["Conformance"])


@router.get("/conformance")
def get_conformance(request: Request, registry: FormatRegistry = Depends(get_format_registry)) -> Response:
    output_format = negotiate_format(request, DocumentKind.CONFORMANCE, registry)
    document = ConformanceDocument(LinkBuilder(base_url(request), registry), output_format)
    return render_response(document.to_dict(), output_format, "ConformanceDeclaration")
