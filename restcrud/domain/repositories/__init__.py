"""Domain repository interfaces.

Concrete implementations live in restcrud/infrastructure/repositories/ and
are wired at the application boundary via dependency injection.
"""

from .base import DEFAULT_SORT, Repository

__all__ = ["DEFAULT_SORT", "Repository"]
