"""OpenAPI description of the service.

The route table is fixed. The ``collectionId`` enumeration and the ``limit``
bounds come from the catalog and the service configuration and are read again
on every build, so catalog changes show up without a restart.
"""

import logging
from copy import deepcopy
from dataclasses import dataclass

from wfsapi.catalog import CatalogView
from wfsapi.config import ServiceConfig
from wfsapi.formats import DocumentKind, FormatRegistry

logger = logging.getLogger(__name__)

OPENAPI_VERSION = "3.0.1"
API_VERSION = "1.0.0"
PARAMETER_REF = "#/components/parameters/{name}"


@dataclass(frozen=True)
class RouteDescription:
    path: str
    operation_id: str
    summary: str
    tag: str
    response_kind: DocumentKind
    parameters: tuple[str, ...] = ()
    method: str = "get"


ROUTES: tuple[RouteDescription, ...] = (
    RouteDescription(
        path="/",
        operation_id="getLandingPage",
        summary="Landing page of this API",
        tag="Capabilities",
        response_kind=DocumentKind.LANDING_PAGE,
    ),
    RouteDescription(
        path="/conformance",
        operation_id="getRequirementsClasses",
        summary="Requirements classes implemented by this API",
        tag="Capabilities",
        response_kind=DocumentKind.CONFORMANCE,
    ),
    RouteDescription(
        path="/collections",
        operation_id="describeCollections",
        summary="Feature collections served by this API",
        tag="Capabilities",
        response_kind=DocumentKind.COLLECTIONS,
    ),
    RouteDescription(
        path="/collections/{collectionId}",
        operation_id="describeCollection",
        summary="Describe a feature collection",
        tag="Capabilities",
        response_kind=DocumentKind.COLLECTION,
        parameters=("collectionId",),
    ),
    RouteDescription(
        path="/collections/{collectionId}/items",
        operation_id="getFeatures",
        summary="Retrieve features of a feature collection",
        tag="Features",
        response_kind=DocumentKind.ITEMS,
        parameters=("collectionId", "limit", "bbox", "time"),
    ),
    RouteDescription(
        path="/collections/{collectionId}/items/{featureId}",
        operation_id="getFeature",
        summary="Retrieve a single feature",
        tag="Features",
        response_kind=DocumentKind.ITEMS,
        parameters=("collectionId", "featureId"),
    ),
)


def collection_id_parameter(catalog: CatalogView) -> dict:
    return {
        "name": "collectionId",
        "in": "path",
        "description": "Identifier (name) of a specific collection",
        "required": True,
        "schema": {
            "type": "string",
            "enum": [collection.id for collection in catalog.list_collections()],
        },
    }


def limit_parameter(config: ServiceConfig) -> dict:
    # TODO: default mirrors the maximum page size, confirm with product whether a smaller default is wanted
    return {
        "name": "limit",
        "in": "query",
        "description": "The optional limit parameter limits the number of items that are presented in the response document.",
        "required": False,
        "style": "form",
        "explode": False,
        "schema": {
            "type": "integer",
            "minimum": 1,
            "maximum": config.max_page_size,
            "default": config.max_page_size,
        },
    }


STATIC_PARAMETERS: dict[str, dict] = {
    "featureId": {
        "name": "featureId",
        "in": "path",
        "description": "Local identifier of a specific feature",
        "required": True,
        "schema": {"type": "string"},
    },
    "bbox": {
        "name": "bbox",
        "in": "query",
        "description": "Only features that have a geometry that intersects the bounding box are selected.",
        "required": False,
        "style": "form",
        "explode": False,
        "schema": {
            "type": "array",
            "minItems": 4,
            "maxItems": 6,
            "items": {"type": "number"},
        },
    },
    "time": {
        "name": "time",
        "in": "query",
        "description": "Only features that have a temporal property that intersects the value are selected.",
        "required": False,
        "style": "form",
        "explode": False,
        "schema": {"type": "string"},
    },
}


class ApiDescriptionBuilder:
    def __init__(self, base_url: str, registry: FormatRegistry) -> None:
        self.base_url = base_url.rstrip("/")
        self.registry = registry

    def _operation(self, route: RouteDescription) -> dict:
        operation: dict = {
            "tags": [route.tag],
            "summary": route.summary,
            "operationId": route.operation_id,
            "responses": {
                "200": {
                    "description": route.summary,
                    "content": {
                        output_format: {} for output_format in self.registry.supported_formats(route.response_kind)
                    },
                },
            },
        }
        if route.parameters:
            operation["parameters"] = [{"$ref": PARAMETER_REF.format(name=name)} for name in route.parameters]
        return operation

    def parameters(self, catalog: CatalogView, config: ServiceConfig) -> dict[str, dict]:
        return {
            "collectionId": collection_id_parameter(catalog),
            "limit": limit_parameter(config),
            **deepcopy(STATIC_PARAMETERS),
        }

    def build(self, catalog: CatalogView, config: ServiceConfig) -> dict:
        parameters = self.parameters(catalog, config)
        logger.debug(
            "Building API description with %d collections and limit %d",
            len(parameters["collectionId"]["schema"]["enum"]),
            config.max_page_size,
        )
        return {
            "openapi": OPENAPI_VERSION,
            "info": {
                "title": config.title,
                "description": config.description,
                "version": API_VERSION,
            },
            "servers": [{"url": self.base_url, "description": config.title}],
            "paths": {route.path: {route.method: self._operation(route)} for route in ROUTES},
            "components": {"parameters": parameters},
        }
