"""Domain services package."""

from .diff import compute_diff, update_body, values_equal

__all__ = ["compute_diff", "update_body", "values_equal"]
