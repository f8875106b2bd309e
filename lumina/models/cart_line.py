from pydantic import Field

from lumina.models.product import Product


class CartLine(Product):
    """A product snapshot plus how many of it are in the cart (always >= 1)."""

    quantity: int = Field(default=1, ge=1)

    @property
    def subtotal(self) -> int:
        return self.price * self.quantity
