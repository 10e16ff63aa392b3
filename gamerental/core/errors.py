"""
Domain error taxonomy.

Validation errors are raised before anything is written. Authorization and
persistence errors abort the current operation; nothing is retried
automatically.
"""


class GameRentalError(Exception):
    """Base class for all domain errors."""


class AuthFailure(GameRentalError):
    """Bad credentials or unknown login."""

    def __init__(self, message: str = "Invalid login"):
        super().__init__(message)


class OrderError(GameRentalError):
    """Base class for order placement errors."""


class UnknownGame(OrderError):
    """A requested game ID is not in the catalog."""

    def __init__(self, game_id: str):
        self.game_id = game_id
        super().__init__(f"Unknown gameID: {game_id}")


class EmptyOrder(OrderError):
    """No requested item was accepted, so no order was created."""

    def __init__(self, rejected=None):
        self.rejected = list(rejected or [])
        super().__init__("Order has no valid items")


class UpdateError(GameRentalError):
    """Base class for update and lookup errors."""


class PersistenceFailure(OrderError, UpdateError):
    """The store rejected a write; the transaction was rolled back."""

    def __init__(self, message: str = "Could not save changes"):
        super().__init__(message)


class Forbidden(UpdateError):
    """Caller's role does not permit the operation."""

    def __init__(self, message: str = "Operation not permitted for this role"):
        super().__init__(message)


class InvalidField(UpdateError):
    """A field value failed validation."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid value for {field}: {reason}")


class NotFound(UpdateError):
    """Record does not exist."""

    def __init__(self, message: str = "Not found"):
        super().__init__(message)


class VisibilityDenied(NotFound):
    """Record exists but is not visible to the caller; reported as NotFound."""
