"""gram utility modules."""

from gram.utils.logging import configure_logging

__all__ = ["configure_logging"]
