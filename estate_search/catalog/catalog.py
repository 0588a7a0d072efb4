"""Read-only property catalog with a load-once, process-wide default."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any

import yaml

from .errors import CatalogLoadError, DuplicatePropertyError, PropertyNotFoundError
from .models import Property

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).parent / "data" / "properties.yaml"


class PropertyCatalog:
    """
    Immutable, ordered collection of properties keyed by id.

    Usage:
        catalog = PropertyCatalog.from_yaml(Path("properties.yaml"))
        prop = catalog.get(3)
        nearby = filter_within_radius(catalog.properties, center, 10)
    """

    def __init__(self, properties: Iterable[Property]):
        """
        Initialize catalog.

        Args:
            properties: Properties in display order

        Raises:
            DuplicatePropertyError: If two properties share an id
        """
        self._properties = tuple(properties)
        self._by_id: dict[int, Property] = {}
        for prop in self._properties:
            if prop.id in self._by_id:
                raise DuplicatePropertyError(f"Duplicate property id: {prop.id}")
            self._by_id[prop.id] = prop

    @classmethod
    def from_records(cls, records: Iterable[dict[str, Any]]) -> PropertyCatalog:
        """Build a catalog from raw property dicts."""
        return cls(Property.from_dict(record) for record in records)

    @classmethod
    def from_yaml(cls, path: Path) -> PropertyCatalog:
        """
        Load a catalog from a YAML file with a top-level 'properties' list.

        Raises:
            CatalogLoadError: If the file is missing or malformed
            InvalidPropertyError: If a record is invalid
            DuplicatePropertyError: If ids repeat
        """
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except FileNotFoundError as e:
            raise CatalogLoadError(f"Catalog file not found: {path}") from e
        except yaml.YAMLError as e:
            raise CatalogLoadError(f"Invalid YAML in catalog {path}: {e}") from e

        if not isinstance(data, dict) or not isinstance(data.get("properties"), list):
            raise CatalogLoadError(f"Catalog {path} missing 'properties' list")

        catalog = cls.from_records(data["properties"])
        logger.info(f"Loaded {len(catalog)} properties from {path}")
        return catalog

    @property
    def properties(self) -> tuple[Property, ...]:
        """All properties in catalog order."""
        return self._properties

    @property
    def cities(self) -> list[str]:
        """Distinct cities in order of first appearance."""
        return list(dict.fromkeys(p.city for p in self._properties))

    def get(self, property_id: int) -> Property:
        """
        Look up a property by id.

        Raises:
            PropertyNotFoundError: If no property has this id
        """
        try:
            return self._by_id[property_id]
        except KeyError:
            raise PropertyNotFoundError(property_id) from None

    def find(self, property_id: int) -> Property | None:
        """Look up a property by id, returning None when absent."""
        return self._by_id.get(property_id)

    def __len__(self) -> int:
        return len(self._properties)

    def __iter__(self) -> Iterator[Property]:
        return iter(self._properties)

    def __contains__(self, property_id: object) -> bool:
        return property_id in self._by_id

    def __repr__(self) -> str:
        return f"PropertyCatalog({len(self._properties)} properties)"


# Process-wide catalog, loaded on first use
_catalog: PropertyCatalog | None = None


def get_catalog() -> PropertyCatalog:
    """Return the process-wide catalog, loading the packaged one on first use."""
    global _catalog
    if _catalog is None:
        _catalog = PropertyCatalog.from_yaml(DEFAULT_CATALOG_PATH)
    return _catalog


def set_catalog(catalog: PropertyCatalog) -> None:
    """Replace the process-wide catalog (e.g. from a configured file or in tests)."""
    global _catalog
    _catalog = catalog


def reset_catalog() -> None:
    """Drop the process-wide catalog so the next get_catalog() reloads it."""
    global _catalog
    _catalog = None
