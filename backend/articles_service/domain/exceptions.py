"""Domain-specific exceptions — framework-independent."""


class NotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class StoreError(Exception):
    """Raised when the backing store fails to read, write or (un)marshal an item.

    Wraps transport and backend errors from the store client; the original
    exception is kept as ``__cause__``.
    """

    def __init__(self, operation: str, message: str):
        self.operation = operation
        self.message = message
        super().__init__(f"[{operation}] {message}")


class ConfigError(Exception):
    """Raised at startup when the store session or client cannot be configured."""
