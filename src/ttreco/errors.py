"""Typed exceptions raised when a job is misconfigured.

All of the exceptions defined here are fatal: they are never caught inside the
package and are meant to reach the top-level job driver, which reports the
message and terminates the run. Per-event failures (unmatched partons, wrong
truth decay channel, missing top-tagged jet) are not errors; they are encoded
as an infinite discriminator value instead.
"""

__all__ = [
    "FatalError",
    "InvalidParameterError",
    "MissingProductError",
    "ProductTypeError",
    "UndeclaredFieldError",
]


class FatalError(RuntimeError):
    """Base exception for all non-recoverable configuration errors."""


class InvalidParameterError(FatalError, ValueError):
    """Raised when a module parameter is set to a forbidden value."""


class MissingProductError(FatalError, KeyError):
    """Raised when a named data product cannot be found in the event."""

    def __str__(self):
        # KeyError quotes its message, undo that
        return str(self.args[0]) if self.args else ""


class ProductTypeError(FatalError, TypeError):
    """Raised when a named data product is not of the expected type."""


class UndeclaredFieldError(FatalError):
    """Raised when writing a discriminator label which was never declared."""

    def __init__(self, collection, label):
        """Initialize with the offending collection and label.

        Parameters
        ----------
        collection : str
            Name of the hypothesis collection
        label : str
            Discriminator label which was written without being declared
        """
        self.collection = collection
        self.label = label
        super().__init__(
            f"Discriminator `{label}` was not declared on the hypothesis "
            f"collection `{collection}` before being written."
        )
