"""
Error taxonomy of the cart core.

Every error carries the HTTP status the request layer answers with and a
``retryable`` flag: only write conflicts are worth retrying, domain errors
will fail again with the same input.
"""

CART_NOT_FOUND = "User does not have a cart"
CART_NOT_FOUND_ON_UPDATE = "User does not have a cart. Use POST to create cart and add a product"
PRODUCT_ALREADY_IN_CART = (
    "Product already in cart. Use the cart sidebar to update or remove product from cart"
)
PRODUCT_NOT_IN_CATALOG = "Product doesn't exist in database"
PRODUCT_NOT_IN_CART = "Product not in cart"
CART_NOT_CREATED = "Cart Not Created Something Went Wrong!!"
CART_MODIFIED = "Cart was modified by another request, try again"
USER_NOT_FOUND = "User not found"
EMAIL_TAKEN = "Email already taken"


class CartError(Exception):
    status_code = 500
    retryable = False

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(CartError):
    """Aggregate does not exist for this owner."""
    status_code = 404


class ConflictError(CartError):
    """Mutation would break a uniqueness rule."""
    status_code = 400


class InvalidReferenceError(CartError):
    """Product id unknown to the catalog or missing from the cart."""
    status_code = 400


class InternalError(CartError):
    status_code = 500


class ConcurrencyConflictError(CartError):
    """Another request changed the cart first; safe to retry."""
    status_code = 409
    retryable = True

    def __init__(self, message: str = CART_MODIFIED):
        super().__init__(message)
