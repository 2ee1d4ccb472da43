"""Document models for the landing page, conformance and collections resources.

Documents are built fresh for every request and are format agnostic: the
renderer receives them fully populated together with the negotiated format.
Every document links to its own representations (one link per supported
format, the rendered one promoted to ``self``) and, depending on the kind,
to other resources of the service.
"""

from pydantic import BaseModel
from pygeoapi import l10n

from wfsapi.catalog import CRS84, CatalogView, CollectionSummary
from wfsapi.config import ServiceConfig
from wfsapi.errors import UnknownCollectionError, UnsupportedFormatError
from wfsapi.formats import DocumentKind
from wfsapi.links import Classification, Link, LinkBuilder, LinkGroup, MarkSelfIfFormatMatches, Relation

CONFORMANCE_CLASSES = [
    "http://www.opengis.net/spec/ogcapi-features-1/1.0/conf/core",
    "http://www.opengis.net/spec/ogcapi-features-1/1.0/conf/oas30",
    "http://www.opengis.net/spec/ogcapi-features-1/1.0/conf/html",
    "http://www.opengis.net/spec/ogcapi-features-1/1.0/conf/geojson",
]


class DocumentModel:
    """Ordered list of links plus the payload of one document kind."""

    kind: DocumentKind

    def __init__(self, builder: LinkBuilder, output_format: str | None = None) -> None:
        supported = builder.registry.supported_formats(self.kind)
        if output_format is not None and output_format not in supported:
            raise UnsupportedFormatError(output_format, supported)
        self.output_format = output_format or builder.registry.default_format(self.kind)
        self.links: list[Link] = []

    def add_link(self, link: Link) -> None:
        self.links.append(link)

    def add_links(self, links: list[Link]) -> None:
        self.links.extend(links)

    def links_for(self, classification: Classification, collection_id: str | None = None) -> list[Link]:
        group = LinkGroup(classification, collection_id)
        return [link for link in self.links if link.group == group]

    def classifications(self) -> list[Classification]:
        seen: list[Classification] = []
        for link in self.links:
            if link.classification not in seen:
                seen.append(link.classification)
        return seen

    def groups(self) -> list[LinkGroup]:
        seen: list[LinkGroup] = []
        for link in self.links:
            if link.group not in seen:
                seen.append(link.group)
        return seen

    def get_link_url(
        self,
        classification: Classification,
        output_format: str,
        collection_id: str | None = None,
    ) -> str | None:
        return next(
            (link.href for link in self.links_for(classification, collection_id) if link.type == output_format),
            None,
        )

    def get_links_except(
        self,
        classification: Classification,
        excluded_format: str,
        collection_id: str | None = None,
    ) -> list[Link]:
        return [link for link in self.links_for(classification, collection_id) if link.type != excluded_format]

    @property
    def self_link(self) -> Link | None:
        return next((link for link in self.links if link.rel == Relation.SELF), None)

    def _own_links(
        self,
        builder: LinkBuilder,
        path: str,
        title_prefix: str,
        classification: Classification,
    ) -> list[Link]:
        return builder.links_for(
            path,
            self.kind,
            title_prefix,
            classification,
            transform=MarkSelfIfFormatMatches(self.output_format),
        )

    def payload(self) -> dict:
        return {}

    def to_dict(self) -> dict:
        return {
            **self.payload(),
            "links": [link.model_dump(mode="json") for link in self.links],
        }


class LandingPage(DocumentModel):
    kind = DocumentKind.LANDING_PAGE

    def __init__(self, builder: LinkBuilder, output_format: str | None, config: ServiceConfig) -> None:
        super().__init__(builder, output_format)
        self.title = config.title
        self.description = config.description

        # self and alternate representations of the landing page
        self.add_links(self._own_links(builder, "/", "This document as ", Classification.LANDING_PAGE))
        self.add_links(
            builder.links_for(
                "api",
                DocumentKind.API,
                "API definition for this endpoint as ",
                Classification.API,
            )
        )
        self.add_links(
            builder.links_for(
                "conformance",
                DocumentKind.CONFORMANCE,
                "Conformance declaration as ",
                Classification.CONFORMANCE,
            )
        )
        self.add_links(
            builder.links_for(
                "collections",
                DocumentKind.COLLECTIONS,
                "Collections Metadata as ",
                Classification.COLLECTIONS,
            )
        )

    def payload(self) -> dict:
        return {"title": self.title, "description": self.description}


class ConformanceDocument(DocumentModel):
    kind = DocumentKind.CONFORMANCE

    def __init__(
        self,
        builder: LinkBuilder,
        output_format: str | None,
        conforms_to: list[str] | None = None,
    ) -> None:
        super().__init__(builder, output_format)
        self.conforms_to = list(CONFORMANCE_CLASSES if conforms_to is None else conforms_to)
        self.add_links(
            self._own_links(builder, "conformance", "Conformance declaration as ", Classification.CONFORMANCE)
        )

    def payload(self) -> dict:
        return {"conformsTo": self.conforms_to}


class CollectionEntry(BaseModel):
    id: str
    title: str
    description: str
    keywords: list[str]
    extent: dict
    crs: list[str]
    formats: list[str]
    links: list[Link]


def _items_links(builder: LinkBuilder, collection_id: str, title: str) -> list[Link]:
    return builder.links_for(
        f"collections/{collection_id}/items",
        DocumentKind.ITEMS,
        f"{title} items as ",
        Classification.ITEMS,
        rel=Relation.ITEMS,
        collection_id=collection_id,
    )


def _collection_entry(
    builder: LinkBuilder,
    collection: CollectionSummary,
    locale: str,
    links: list[Link] | None = None,
) -> CollectionEntry:
    title = l10n.translate(collection.title, locale)
    return CollectionEntry(
        id=collection.id,
        title=title,
        description=l10n.translate(collection.description, locale),
        keywords=collection.keywords,
        extent={"spatial": {"bbox": [list(collection.spatial_bbox)], "crs": CRS84}},
        crs=[CRS84],
        formats=builder.registry.supported_formats(DocumentKind.ITEMS),
        links=_items_links(builder, collection.id, title) if links is None else links,
    )


class CollectionsDocument(DocumentModel):
    kind = DocumentKind.COLLECTIONS

    def __init__(
        self,
        builder: LinkBuilder,
        output_format: str | None,
        catalog: CatalogView,
        locale: str = "en",
    ) -> None:
        super().__init__(builder, output_format)
        self.add_links(
            self._own_links(builder, "collections", "Collections Metadata as ", Classification.COLLECTIONS)
        )
        self.collections: list[CollectionEntry] = []
        for collection in catalog.list_collections():
            entry = _collection_entry(builder, collection, locale)
            self.collections.append(entry)
            self.add_links(entry.links)

    def to_dict(self) -> dict:
        # item links are rendered inside their collection entry
        return {
            "collections": [entry.model_dump(mode="json") for entry in self.collections],
            "links": [link.model_dump(mode="json") for link in self.links_for(Classification.COLLECTIONS)],
        }


class CollectionDocument(DocumentModel):
    kind = DocumentKind.COLLECTION

    def __init__(
        self,
        builder: LinkBuilder,
        output_format: str | None,
        catalog: CatalogView,
        collection_id: str,
        locale: str = "en",
    ) -> None:
        super().__init__(builder, output_format)
        collection = catalog.get_collection(collection_id)
        if collection is None:
            raise UnknownCollectionError(collection_id)

        self.entry = _collection_entry(builder, collection, locale, links=[])
        self.add_links(
            self._own_links(
                builder,
                f"collections/{collection.id}",
                f"{self.entry.title} metadata as ",
                Classification.COLLECTION,
            )
        )
        self.add_links(_items_links(builder, collection.id, self.entry.title))

    def payload(self) -> dict:
        return self.entry.model_dump(mode="json", exclude={"links"})
