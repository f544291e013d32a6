"""
Domain errors raised by the service layer.

Every error carries the HTTP status the API layer answers with, so routes can
let them propagate and a single exception handler renders `{"detail": ...}`.
"""

from typing import Iterable


class NorthwindError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(NorthwindError):
    status_code = 404


class AlreadyExists(NorthwindError):
    pass


class InvalidRole(NorthwindError):
    pass


class InvalidQuantity(NorthwindError):
    def __init__(self, product_id: int, quantity: int):
        super().__init__(
            f"Quantity for product with id {product_id} must be greater than zero (got {quantity})"
        )
        self.product_id = product_id
        self.quantity = quantity


class ProductsNotFound(NorthwindError):
    def __init__(self, product_ids: Iterable[int]):
        self.product_ids = list(product_ids)
        super().__init__(f"Products with ids {format_id_list(self.product_ids)} not found")


class OrderImmutable(NorthwindError):
    pass


class MissingLocation(NorthwindError):
    pass


class PersistenceFailure(NorthwindError):
    pass


class InvalidCredentials(NorthwindError):
    status_code = 401


class InvalidRefreshToken(NorthwindError):
    status_code = 401


class ExpiredRefreshToken(NorthwindError):
    status_code = 401


class Forbidden(NorthwindError):
    status_code = 403


def format_id_list(ids: Iterable[int]) -> str:
    """[2,3] -- no spaces, insertion order kept."""
    return "[" + ",".join(str(i) for i in ids) + "]"
