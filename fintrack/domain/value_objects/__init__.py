from .money import DEFAULT_CURRENCY, Money

__all__ = ["Money", "DEFAULT_CURRENCY"]
