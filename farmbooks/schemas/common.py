"""Shared schema building blocks."""

from decimal import Decimal
from typing import Annotated, ClassVar, Generic, List, Optional, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict, PlainSerializer, model_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T")

# Kept as Decimal in Python, written as a JSON number. Inputs are capped at
# 15 significant digits so the float written back is exact.
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CamelModel(BaseModel):
    """Base schema exchanging camelCase JSON with snake_case attributes."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PartialUpdate(CamelModel):
    """
    Base for partial updates.

    Fields are optional so they can be omitted, but the fields named in
    ``not_nullable`` back NOT NULL columns and may not be sent as null.
    """
    not_nullable: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_null_required(self) -> "PartialUpdate":
        nulled = [
            name for name in self.not_nullable
            if name in self.model_fields_set and getattr(self, name) is None
        ]
        if nulled:
            raise ValueError(f"Fields cannot be null: {', '.join(nulled)}")
        return self


class Pagination(CamelModel):
    """Pagination block of a list response."""
    page: int
    limit: int
    total: int
    pages: int


class Page(CamelModel, Generic[T]):
    """One page of list results."""
    items: List[T]
    pagination: Pagination


class ApiResponse(CamelModel, Generic[T]):
    """Envelope every endpoint responds with."""
    message: str
    data: Optional[T] = None
