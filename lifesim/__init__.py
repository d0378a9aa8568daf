"""Year-by-year balance projection from capital, incomes and expenses."""

__version__ = "0.1.0"
__all__ = ["analytics", "cli", "forms", "models", "settings", "simulator"]