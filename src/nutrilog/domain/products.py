"""Domain models for the product catalog."""

from dataclasses import dataclass
from uuid import UUID

from nutrilog.domain.nutrition import MacroProfile, Unit


@dataclass(frozen=True)
class Product:
    """A food product with values per 100 g/ml, or per 1 for count units."""

    id: UUID
    name: str
    values: MacroProfile
    unit: Unit = Unit.GRAM
    is_custom: bool = True
    created_by: UUID | None = None
