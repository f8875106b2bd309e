from lumina.models.cart_line import CartLine
from lumina.models.chat_message import ChatMessage, ChatRole
from lumina.models.identity import AuthMode, Credentials, Identity, Role
from lumina.models.product import Category, Product, ProductDraft

__all__ = [
    "AuthMode",
    "CartLine",
    "Category",
    "ChatMessage",
    "ChatRole",
    "Credentials",
    "Identity",
    "Product",
    "ProductDraft",
    "Role",
]
