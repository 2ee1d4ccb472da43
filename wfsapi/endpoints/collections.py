from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from wfsapi.catalog import CatalogView
from wfsapi.documents import CollectionDocument, CollectionsDocument
from wfsapi.endpoints.dependencies import (
    base_url,
    get_catalog,
    get_format_registry,
    locale_from_request,
    negotiate_format,
    render_response,
)
from wfsapi.endpoints.errors import unknown_collection
from wfsapi.errors import UnknownCollectionError
from wfsapi.formats import DocumentKind, FormatRegistry
from wfsapi.links import LinkBuilder

router = APIRouter(tags=["Collections"])


@router.get("/collections")
def get_collections(
    request: Request,
    registry: FormatRegistry = Depends(get_format_registry),
    catalog: CatalogView = Depends(get_catalog),
) -> Response:
    output_format = negotiate_format(request, DocumentKind.COLLECTIONS, registry)
    document = CollectionsDocument(
        LinkBuilder(base_url(request), registry),
        output_format,
        catalog,
        locale=locale_from_request(request),
    )
    return render_response(document.to_dict(), output_format, "Collections")


@router.get("/collections/{collectionId}")
def get_collection(
    collectionId: str,
    request: Request,
    registry: FormatRegistry = Depends(get_format_registry),
    catalog: CatalogView = Depends(get_catalog),
) -> Response:
    output_format = negotiate_format(request, DocumentKind.COLLECTION, registry)
    try:
        document = CollectionDocument(
            LinkBuilder(base_url(request), registry),
            output_format,
            catalog,
            collectionId,
            locale=locale_from_request(request),
        )
    except UnknownCollectionError as error:
        raise unknown_collection(error) from error
    return render_response(document.to_dict(), output_format, "Collection")
