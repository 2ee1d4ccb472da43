"""Hypermedia links and the builder that emits one link per supported format."""

from dataclasses import dataclass
from enum import StrEnum
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, Field
from pygeoapi.util import url_join

from wfsapi.formats import DocumentKind, FormatRegistry

SELF_TITLE = "This document"


class Relation(StrEnum):
    SELF = "self"
    ALTERNATE = "alternate"
    SERVICE = "service"
    ITEM = "item"
    ITEMS = "items"
    COLLECTION = "collection"
    ROOT = "root"


class Classification(StrEnum):
    """Groups links pointing at the same resource in different formats."""

    LANDING_PAGE = "landingPage"
    API = "api"
    CONFORMANCE = "conformance"
    COLLECTIONS = "collections"
    COLLECTION = "collection"
    ITEMS = "items"


@dataclass(frozen=True)
class LinkGroup:
    """Key of the links that represent one resource in its different formats.

    Per-collection resources such as item listings are told apart by ``collection_id``.
    """

    classification: Classification
    collection_id: str | None = None


class Link(BaseModel):
    """Hypermedia link."""

    model_config = ConfigDict(frozen=True)

    href: str
    rel: Relation
    type: str
    title: str
    classification: Classification = Field(exclude=True)
    collection_id: str | None = Field(default=None, exclude=True)

    @property
    def group(self) -> LinkGroup:
        return LinkGroup(self.classification, self.collection_id)


@dataclass(frozen=True)
class NoTransform:
    def apply(self, output_format: str, link: Link) -> Link:
        return link


@dataclass(frozen=True)
class MarkSelfIfFormatMatches:
    """Promote the link whose format is the one being rendered to ``self``."""

    format: str

    def apply(self, output_format: str, link: Link) -> Link:
        if output_format != self.format:
            return link
        return link.model_copy(update={"rel": Relation.SELF, "title": SELF_TITLE})


LinkTransform = NoTransform | MarkSelfIfFormatMatches


def build_url(base_url: str, path: str, output_format: str) -> str:
    url = url_join(base_url, path)
    # url_join strips trailing slashes, the landing page keeps its own
    if path.endswith("/") and not url.endswith("/"):
        url = f"{url}/"
    return f"{url}?{urlencode({'f': output_format})}"


def build_links(
    base_url: str,
    path: str,
    title_prefix: str,
    classification: Classification,
    formats: list[str],
    transform: LinkTransform = NoTransform(),
    rel: Relation = Relation.SERVICE,
    collection_id: str | None = None,
) -> list[Link]:
    links: list[Link] = []
    for output_format in formats:
        link = Link(
            href=build_url(base_url, path, output_format),
            rel=rel,
            type=output_format,
            title=f"{title_prefix}{output_format}",
            classification=classification,
            collection_id=collection_id,
        )
        links.append(transform.apply(output_format, link))
    return links


class LinkBuilder:
    """Builds link groups for a request, bound to its base URL and format registry."""

    def __init__(self, base_url: str, registry: FormatRegistry) -> None:
        self.base_url = base_url.rstrip("/")
        self.registry = registry

    def links_for(
        self,
        path: str,
        kind: DocumentKind,
        title_prefix: str,
        classification: Classification,
        transform: LinkTransform = NoTransform(),
        rel: Relation = Relation.SERVICE,
        collection_id: str | None = None,
    ) -> list[Link]:
        return build_links(
            self.base_url,
            path,
            title_prefix,
            classification,
            self.registry.supported_formats(kind),
            transform=transform,
            rel=rel,
            collection_id=collection_id,
        )
