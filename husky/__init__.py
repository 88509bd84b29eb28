"""husky: an interactive calculator with unit conversions."""

__app_name__ = "husky"
__version__ = "0.3.0"
