"""Business rules for measures and products."""

from __future__ import annotations

from typing import Any

from .models import Measure, Product
from .repository import EntityType, NotFoundError, RepositoryError

COMBINED_ENTITY_TYPE = "GetAllEntity"


class ValidationError(Exception):
    """Input was rejected before reaching storage."""


def _check_page(limit: int, offset: int) -> None:
    if limit <= 0 or offset < 0:
        raise ValidationError("invalid pagination parameters")


class MeasureService:
    """Validates and forwards operations on measures."""

    def __init__(self, repo: Any) -> None:
        self._repo = repo

    def get_by_id(self, id: int) -> Measure:
        return self._repo.get_by_id(id)

    def get_all(self, limit: int, offset: int) -> list[Measure]:
        _check_page(limit, offset)
        return self._repo.get_all(limit, offset)

    def create(self, measure: Measure) -> int:
        if not measure.name:
            raise ValidationError("measure name cannot be empty")
        return self._repo.create(measure)

    def update(self, id: int, measure: Measure) -> Measure:
        if not measure.name:
            raise ValidationError("measure name cannot be empty")
        self._require(id)
        try:
            return self._repo.update(id, measure)
        except NotFoundError as exc:
            raise NotFoundError(f"update failed: {exc}") from exc
        except RepositoryError as exc:
            raise RepositoryError(f"update failed: {exc}") from exc

    def delete(self, id: int) -> None:
        self._require(id)
        self._repo.delete(id)

    def _require(self, id: int) -> None:
        try:
            self._repo.get_by_id(id)
        except RepositoryError as exc:
            raise NotFoundError(f"measure not found: {exc}") from exc


class ProductService:
    """Validates and forwards operations on products."""

    def __init__(self, repo: Any) -> None:
        self._repo = repo

    def get_by_id(self, id: int) -> Product:
        return self._repo.get_by_id(id)

    def get_all(self, limit: int, offset: int) -> list[Product]:
        _check_page(limit, offset)
        return self._repo.get_all(limit, offset)

    def create(self, product: Product) -> int:
        if product.measure_id <= 0:
            raise ValidationError("invalid measure ID")
        self._check_fields(product)
        return self._repo.create(product)

    def update(self, id: int, product: Product) -> Product:
        self._check_fields(product)
        self._require(id)
        return self._repo.update(id, product)

    def delete(self, id: int) -> None:
        self._require(id)
        self._repo.delete(id)

    @staticmethod
    def _check_fields(product: Product) -> None:
        if not product.name:
            raise ValidationError("product name cannot be empty")
        if product.quantity < 0:
            raise ValidationError("quantity cannot be negative")
        if product.unit_cost <= 0:
            raise ValidationError("unit cost must be positive")

    def _require(self, id: int) -> None:
        try:
            self._repo.get_by_id(id)
        except RepositoryError as exc:
            raise NotFoundError(f"product not found: {exc}") from exc


class UniversalService:
    """Lists entities of any kind, or products and measures together."""

    def __init__(self, repo: Any) -> None:
        self._repo = repo

    def get_all_entities(
        self, entity_type: EntityType | str, limit: int, offset: int
    ) -> Any:
        if entity_type == COMBINED_ENTITY_TYPE:
            products = self._repo.get_all_entities(EntityType.PRODUCT.value, limit, offset)
            measures = self._repo.get_all_entities(EntityType.MEASURE.value, limit, offset)
            return {"products": products, "measures": measures}
        return self._repo.get_all_entities(entity_type, limit, offset)