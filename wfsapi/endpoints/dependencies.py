"""Request-scoped collaborators, injected with ``Depends`` so tests can override them."""

from fastapi import Request
from fastapi.responses import Response
from pygeoapi import l10n

from wfsapi.catalog import CatalogView, YamlCatalog
from wfsapi.config import ServiceConfig, catalog_path, load_service_config
from wfsapi.endpoints.errors import unsupported_format
from wfsapi.errors import UnsupportedFormatError
from wfsapi.formats import DEFAULT_REGISTRY, DocumentKind, FormatRegistry
from wfsapi.negotiation import ContentNegotiator
from wfsapi.rendering import render


def get_format_registry() -> FormatRegistry:
    return DEFAULT_REGISTRY


def get_catalog() -> CatalogView:
    return YamlCatalog(catalog_path())


def get_service_config() -> ServiceConfig:
    return load_service_config()


def base_url(request: Request) -> str:
    return str(request.base_url).rstrip("/")


def locale_from_request(request: Request) -> str:
    requested = request.query_params.get("lang", "en")
    locale = l10n.str2locale(requested, silent=True)
    return l10n.locale2str(locale) if locale else "en"


def negotiate_format(request: Request, kind: DocumentKind, registry: FormatRegistry) -> str:
    try:
        return ContentNegotiator(registry).negotiate(
            kind,
            request.query_params.get("f"),
            request.headers.get("accept"),
        )
    except UnsupportedFormatError as error:
        raise unsupported_format(error) from error


def render_response(
    payload: dict,
    output_format: str,
    root: str,
    template: str | None = None,
    **context,
) -> Response:
    try:
        return render(payload, output_format, root, template=template, **context)
    except UnsupportedFormatError as error:
        raise unsupported_format(error) from error
