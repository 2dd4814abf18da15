"""Errors raised by catalog lookups."""


class CatalogError(Exception):
    """Base class for catalog errors."""


class ModelNotFoundError(CatalogError, LookupError):
    """Raised when a model id is not in the catalog."""

    def __init__(self, model_id: str):
        self.model_id = model_id
        super().__init__(f"Unknown model: {model_id}")
