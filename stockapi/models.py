"""Records stored by the service."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping


def _require_mapping(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError("expected a JSON object")
    return data


def _int_field(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key, 0)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field '{key}' must be an integer")
    return value


def _float_field(data: Mapping[str, Any], key: str) -> float:
    value = data.get(key, 0.0)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"field '{key}' must be a number")
    return float(value)


def _str_field(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key, "")
    if not isinstance(value, str):
        raise ValueError(f"field '{key}' must be a string")
    return value


@dataclass
class Measure:
    """A unit of measure."""

    id: int = 0
    name: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Measure":
        """Build a measure from decoded JSON; missing fields take zero values."""
        data = _require_mapping(data)
        return cls(id=_int_field(data, "id"), name=_str_field(data, "name"))


@dataclass
class Product:
    """A stocked product."""

    id: int = 0
    name: str = ""
    quantity: int = 0
    unit_cost: float = 0.0
    measure_id: int = 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Product":
        """Build a product from decoded JSON; missing fields take zero values."""
        data = _require_mapping(data)
        return cls(
            id=_int_field(data, "id"),
            name=_str_field(data, "name"),
            quantity=_int_field(data, "quantity"),
            unit_cost=_float_field(data, "unit_cost"),
            measure_id=_int_field(data, "measure_id"),
        )