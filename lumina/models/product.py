"""
Product Model
─────────────
A catalog entry. Prices are integer KRW (minor unit == major unit for won),
so totals never drift through float rounding.
"""
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Category(str, Enum):
    # Filter sentinel meaning "no category restriction". Never stored on a product.
    ALL = "전체"
    CLOTHING = "의류"
    ELECTRONICS = "전자제품"
    HOME = "홈/리빙"
    ACCESSORIES = "액세서리"

    @classmethod
    def concrete(cls) -> list["Category"]:
        return [c for c in cls if c is not cls.ALL]


class Product(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    id: int
    name: str
    price: int = Field(ge=0)
    category: Category
    image: str = ""
    description: str = ""
    tags: list[str] = Field(default_factory=list)

    @field_validator("category")
    @classmethod
    def _not_sentinel(cls, value: Category) -> Category:
        if value is Category.ALL:
            raise ValueError("Category.ALL is a filter sentinel, not a product category")
        return value


class ProductDraft(BaseModel):
    """Partially-filled product coming from the admin form."""

    id: int
    name: str | None = None
    price: int | None = Field(default=None, ge=0)
    category: Category = Category.CLOTHING
    image: str = ""
    description: str = ""
    tags: list[str] = Field(default_factory=list)
