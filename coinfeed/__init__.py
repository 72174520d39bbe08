"""Websocket market data client and message types for the Coinbase feed."""

__version__ = "1.0.0"
__all__ = ["__version__"]