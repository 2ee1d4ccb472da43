"""Output formats and the per-document-kind format registry."""

from collections import OrderedDict
from collections.abc import Mapping, Sequence
from enum import StrEnum

F_JSON = "application/json"
F_XML = "text/xml"
F_YAML = "application/x-yaml"
F_HTML = "text/html"
F_GEOJSON = "application/geo+json"

#: Short names accepted through ?f= (order matters for reverse lookups)
FORMAT_ALIASES = OrderedDict(
    (
        ("json", F_JSON),
        ("xml", F_XML),
        ("yaml", F_YAML),
        ("html", F_HTML),
        ("geojson", F_GEOJSON),
    )
)


class DocumentKind(StrEnum):
    """Distinct representable resources of the service."""

    LANDING_PAGE = "landingPage"
    API = "api"
    CONFORMANCE = "conformance"
    COLLECTIONS = "collections"
    COLLECTION = "collection"
    ITEMS = "items"


DEFAULT_FORMATS: dict[DocumentKind, tuple[str, ...]] = {
    DocumentKind.LANDING_PAGE: (F_JSON, F_XML, F_YAML, F_HTML),
    DocumentKind.API: (F_JSON, F_YAML, F_HTML),
    DocumentKind.CONFORMANCE: (F_JSON, F_XML, F_YAML),
    DocumentKind.COLLECTIONS: (F_JSON, F_XML, F_YAML),
    DocumentKind.COLLECTION: (F_JSON, F_XML, F_YAML),
    DocumentKind.ITEMS: (F_GEOJSON, F_HTML),
}


def normalize_format(value: str) -> str:
    """Map a short alias such as ``json`` to its MIME type, lower-casing anything else."""
    cleaned = value.strip().lower()
    return FORMAT_ALIASES.get(cleaned, cleaned)


class FormatRegistry:
    """Ordered set of output formats supported by each document kind.

    The first format of a kind is its default representation.
    """

    def __init__(self, table: Mapping[DocumentKind, Sequence[str]] | None = None) -> None:
        source = DEFAULT_FORMATS if table is None else table
        self._table = {DocumentKind(kind): tuple(formats) for kind, formats in source.items()}

    def supported_formats(self, kind: DocumentKind) -> list[str]:
        return list(self._table.get(kind, ()))

    def default_format(self, kind: DocumentKind) -> str:
        formats = self._table.get(kind, ())
        return formats[0] if formats else F_JSON


DEFAULT_REGISTRY = FormatRegistry()
