"""Field value checks for bibliography entries."""

from .year import check_year

__all__ = ["check_year"]
