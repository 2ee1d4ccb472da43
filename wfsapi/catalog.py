import logging
from pathlib import Path
from typing import Protocol

from pydantic import BaseModel, Field
import yaml

logger = logging.getLogger(__name__)

CRS84 = "http://www.opengis.net/def/crs/OGC/1.3/CRS84"
WORKSPACE_SEPARATOR = ":"
ENCODED_SEPARATOR = "__"
DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent / "data" / "catalog.yml"


def encode_collection_id(name: str) -> str:
    """Turn a qualified ``workspace:name`` into an NCName-safe ``workspace__name``."""
    workspace, separator, local_name = name.partition(WORKSPACE_SEPARATOR)
    if not separator:
        return name
    return f"{workspace}{ENCODED_SEPARATOR}{local_name}"


class CollectionSummary(BaseModel):
    name: str
    title: str | dict[str, str]
    description: str | dict[str, str] = ""
    keywords: list[str] = Field(default_factory=list)
    spatial_bbox: tuple[float, float, float, float] = (-180.0, -90.0, 180.0, 90.0)

    @property
    def id(self) -> str:
        return encode_collection_id(self.name)


class CatalogView(Protocol):
    def list_collections(self) -> list[CollectionSummary]: ...

    def get_collection(self, collection_id: str) -> CollectionSummary | None: ...


def _find(collections: list[CollectionSummary], collection_id: str) -> CollectionSummary | None:
    return next((collection for collection in collections if collection.id == collection_id), None)


class InMemoryCatalog:
    def __init__(self, collections: list[CollectionSummary] | None = None) -> None:
        self._collections = list(collections or [])

    def add(self, collection: CollectionSummary) -> None:
        if _find(self._collections, collection.id) is not None:
            raise RuntimeError(f"Duplicate collection name found: {collection.name}")
        self._collections.append(collection)

    def remove(self, collection_id: str) -> None:
        self._collections = [collection for collection in self._collections if collection.id != collection_id]

    def list_collections(self) -> list[CollectionSummary]:
        return list(self._collections)

    def get_collection(self, collection_id: str) -> CollectionSummary | None:
        return _find(self._collections, collection_id)


class YamlCatalog:
    """Catalog backed by a YAML file, read again on every access."""

    def __init__(self, path: Path | str = DEFAULT_CATALOG_PATH) -> None:
        self.path = Path(path)

    def list_collections(self) -> list[CollectionSummary]:
        if not self.path.exists():
            logger.warning("Catalog file %s does not exist, serving an empty catalog", self.path)
            return []

        with self.path.open("r", encoding="utf-8") as file_handle:
            payload = yaml.safe_load(file_handle) or {}

        collections: list[CollectionSummary] = []
        seen: set[str] = set()
        for item in payload.get("collections") or []:
            collection = CollectionSummary.model_validate(item)
            if collection.id in seen:
                raise RuntimeError(f"Duplicate collection name found: {collection.name}")
            seen.add(collection.id)
            collections.append(collection)

        return collections

    def get_collection(self, collection_id: str) -> CollectionSummary | None:
        return _find(self.list_collections(), collection_id)
