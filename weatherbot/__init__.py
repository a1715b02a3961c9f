"""Telegram bot that reports the weather and remembers favourite cities."""

__version__ = "0.1.0"
__all__ = ["__version__"]