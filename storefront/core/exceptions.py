"""
Error taxonomy for catalog and cart operations.

Every error carries the HTTP status the API layer answers with, so the
exception handler in ``storefront.main`` needs no per-class mapping.
"""

from typing import Optional


class StorefrontError(Exception):
    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(StorefrontError):
    """Malformed product id or quantity."""
    status_code = 400
    default_message = "Invalid request."


class NotFoundError(StorefrontError):
    status_code = 404
    default_message = "Not found."


class BusinessRuleError(StorefrontError):
    """Well-formed request rejected by a cart rule."""
    status_code = 400


class InvalidProductId(ValidationError):
    default_message = "Invalid product ID. Product ID must be a number."


class InvalidQuantity(ValidationError):
    default_message = "Quantity must be a positive integer."


class QuantityRequired(ValidationError):
    default_message = "Quantity is required for update operation."


class ProductNotFound(NotFoundError):
    default_message = "Product not found."


class CartItemNotFound(NotFoundError):
    default_message = "Item not found in cart."


class InsufficientStock(BusinessRuleError):
    def __init__(self, stock: int, message: Optional[str] = None):
        self.stock = stock
        super().__init__(message or f"Insufficient stock. Only {stock} items available.")


class CartAlreadyEmpty(BusinessRuleError):
    default_message = "Cart is already empty."
