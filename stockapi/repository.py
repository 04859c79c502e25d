"""SQL storage of products and measures."""

from __future__ import annotations

from enum import Enum
from typing import Any

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from .models import Measure, Product


class EntityType(str, Enum):
    """Kinds of entity that can be listed together."""

    PRODUCT = "product"
    MEASURE = "measure"
    ALL = "all"


class RepositoryError(Exception):
    """A storage operation failed."""


class NotFoundError(RepositoryError):
    """The requested record does not exist."""


_GET_PRODUCT_BY_ID = text(
    "SELECT id, name, quantity, unit_cost, measure_id FROM products WHERE id = :id"
)
_GET_ALL_PRODUCTS = text(
    "SELECT id, name, quantity, unit_cost, measure_id FROM products "
    "ORDER BY id LIMIT :limit OFFSET :offset"
)
_CREATE_PRODUCT = text(
    "INSERT INTO products (name, quantity, unit_cost, measure_id) "
    "VALUES (:name, :quantity, :unit_cost, :measure_id) RETURNING id"
)
_UPDATE_PRODUCT = text(
    "UPDATE products SET name = :name, quantity = :quantity, "
    "unit_cost = :unit_cost, measure_id = :measure_id WHERE id = :id "
    "RETURNING id, name, quantity, unit_cost, measure_id"
)
_DELETE_PRODUCT = text("DELETE FROM products WHERE id = :id RETURNING id")

_GET_ALL_MEASURES = text(
    "SELECT id, name FROM measures ORDER BY id LIMIT :limit OFFSET :offset"
)
_GET_MEASURE_BY_ID = text("SELECT id, name FROM measures WHERE id = :id")
_CREATE_MEASURE = text("INSERT INTO measures (name) VALUES (:name) RETURNING id")
_UPDATE_MEASURE = text(
    "UPDATE measures SET name = :name WHERE id = :id RETURNING id, name"
)
_DELETE_MEASURE = text("DELETE FROM measures WHERE id = :id")


def _product_from_row(row: Any) -> Product:
    return Product(
        id=int(row.id),
        name=row.name,
        quantity=int(row.quantity),
        unit_cost=float(row.unit_cost),
        measure_id=int(row.measure_id),
    )


def _measure_from_row(row: Any) -> Measure:
    return Measure(id=int(row.id), name=row.name)


def _product_params(product: Product) -> dict[str, Any]:
    return {
        "name": product.name,
        "quantity": product.quantity,
        "unit_cost": product.unit_cost,
        "measure_id": product.measure_id,
    }


class ProductRepository:
    """Products stored in the ``products`` table."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def get_by_id(self, id: int) -> Product:
        try:
            with self._engine.connect() as conn:
                row = conn.execute(_GET_PRODUCT_BY_ID, {"id": id}).one_or_none()
        except SQLAlchemyError as exc:
            raise RepositoryError(str(exc)) from exc
        if row is None:
            raise NotFoundError(f"product with id {id} not found")
        return _product_from_row(row)

    def get_all(self, limit: int, offset: int) -> list[Product]:
        try:
            with self._engine.connect() as conn:
                rows = conn.execute(
                    _GET_ALL_PRODUCTS, {"limit": limit, "offset": offset}
                ).all()
        except SQLAlchemyError as exc:
            raise RepositoryError(f"failed to query products: {exc}") from exc
        return [_product_from_row(row) for row in rows]

    def create(self, product: Product) -> int:
        try:
            with self._engine.begin() as conn:
                new_id = conn.execute(_CREATE_PRODUCT, _product_params(product)).scalar_one()
        except SQLAlchemyError as exc:
            raise RepositoryError(f"failed to create product: {exc}") from exc
        return int(new_id)

    def update(self, id: int, product: Product) -> Product:
        try:
            with self._engine.begin() as conn:
                row = conn.execute(
                    _UPDATE_PRODUCT, {**_product_params(product), "id": id}
                ).one_or_none()
        except SQLAlchemyError as exc:
            raise RepositoryError(f"failed to update product: {exc}") from exc
        if row is None:
            raise NotFoundError(f"product not found with id: {id}")
        return _product_from_row(row)

    def delete(self, id: int) -> None:
        try:
            with self._engine.begin() as conn:
                row = conn.execute(_DELETE_PRODUCT, {"id": id}).one_or_none()
        except SQLAlchemyError as exc:
            raise RepositoryError(f"failed to delete product: {exc}") from exc
        if row is None:
            raise NotFoundError(f"product with id {id} not found")


class MeasureRepository:
    """Units of measure stored in the ``measures`` table."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def get_by_id(self, id: int) -> Measure:
        if id <= 0:
            raise RepositoryError("invalid ID")
        try:
            with self._engine.connect() as conn:
                row = conn.execute(_GET_MEASURE_BY_ID, {"id": id}).one_or_none()
        except SQLAlchemyError as exc:
            raise RepositoryError(f"repository error: {exc}") from exc
        if row is None:
            raise NotFoundError("repository error: measure not found")
        return _measure_from_row(row)

    def get_all(self, limit: int, offset: int) -> list[Measure]:
        try:
            with self._engine.connect() as conn:
                rows = conn.execute(
                    _GET_ALL_MEASURES, {"limit": limit, "offset": offset}
                ).all()
        except SQLAlchemyError as exc:
            raise RepositoryError(f"failed to query measures: {exc}") from exc
        return [_measure_from_row(row) for row in rows]

    def create(self, measure: Measure) -> int:
        try:
            with self._engine.begin() as conn:
                new_id = conn.execute(_CREATE_MEASURE, {"name": measure.name}).scalar_one()
        except SQLAlchemyError as exc:
            raise RepositoryError(f"failed to create measure: {exc}") from exc
        return int(new_id)

    def update(self, id: int, measure: Measure) -> Measure:
        try:
            with self._engine.begin() as conn:
                row = conn.execute(
                    _UPDATE_MEASURE, {"name": measure.name, "id": id}
                ).one_or_none()
        except SQLAlchemyError as exc:
            raise RepositoryError(f"failed to update measure: {exc}") from exc
        if row is None:
            raise NotFoundError("measure not found")
        return _measure_from_row(row)

    def delete(self, id: int) -> None:
        try:
            with self._engine.begin() as conn:
                result = conn.execute(_DELETE_MEASURE, {"id": id})
                affected = result.rowcount
        except SQLAlchemyError as exc:
            raise RepositoryError(f"failed to delete measure: {exc}") from exc
        if affected == 0:
            raise NotFoundError("measure not found")


class UnifiedRepository:
    """Products and measures behind one object."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self.product = ProductRepository(engine)
        self.measure = MeasureRepository(engine)

    def get_all_entities(
        self, entity_type: EntityType | str, limit: int, offset: int
    ) -> list[Product] | list[Measure]:
        """List one page of the given kind of entity."""
        value = entity_type.value if isinstance(entity_type, EntityType) else str(entity_type)
        if value == EntityType.PRODUCT.value:
            return self.product.get_all(limit, offset)
        if value == EntityType.MEASURE.value:
            return self.measure.get_all(limit, offset)
        raise RepositoryError(f"unknown entity type: {value}")

    def get_all_products(self, limit: int, offset: int) -> list[Product]:
        return self.product.get_all(limit, offset)

    def get_product_by_id(self, id: int) -> Product:
        return self.product.get_by_id(id)

    def create_product(self, product: Product) -> int:
        return self.product.create(product)

    def update_product(self, id: int, product: Product) -> Product:
        return self.product.update(id, product)

    def delete_product(self, id: int) -> None:
        self.product.delete(id)

    def get_all_measures(self, limit: int, offset: int) -> list[Measure]:
        return self.measure.get_all(limit, offset)

    def get_measure_by_id(self, id: int) -> Measure:
        return self.measure.get_by_id(id)

    def create_measure(self, measure: Measure) -> int:
        return self.measure.create(measure)

    def update_measure(self, id: int, measure: Measure) -> Measure:
        return self.measure.update(id, measure)

    def delete_measure(self, id: int) -> None:
        self.measure.delete(id)