from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from main import app
from wfsapi.catalog import CollectionSummary, InMemoryCatalog
from wfsapi.config import ServiceConfig
from wfsapi.endpoints.dependencies import get_catalog, get_service_config
from wfsapi.formats import DEFAULT_REGISTRY
from wfsapi.links import LinkBuilder

BASE_URL = "http://localhost:8080/geoserver/wfs3"


@pytest.fixture
def catalog() -> InMemoryCatalog:
    return InMemoryCatalog(
        [
            CollectionSummary(name="cdf:Fifteen", title="Fifteen", keywords=["points"]),
            CollectionSummary(
                name="cite:Buildings",
                title={"en": "Buildings", "fr": "Bâtiments"},
                description={"en": "Building footprints", "fr": "Emprises des bâtiments"},
                spatial_bbox=(0.0008, 0.0005, 0.0024, 0.001),
            ),
            CollectionSummary(name="topp:states", title="USA Population"),
        ]
    )


@pytest.fixture
def service_config() -> ServiceConfig:
    return ServiceConfig(title="Test WFS", description="Features for tests", max_page_size=500)


@pytest.fixture
def builder() -> LinkBuilder:
    return LinkBuilder(BASE_URL, DEFAULT_REGISTRY)


@pytest.fixture
def client(catalog: InMemoryCatalog, service_config: ServiceConfig) -> Iterator[TestClient]:
    app.dependency_overrides[get_catalog] = lambda: catalog
    app.dependency_overrides[get_service_config] = lambda: service_config
    yield TestClient(app)
    app.dependency_overrides.clear()
