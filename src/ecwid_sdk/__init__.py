"""
Ecwid SDK - typed client for the Ecwid store REST API and a webhook dispatcher.
"""

from .api_client import EcwidClient

__version__ = "0.1.0"

__all__ = ["EcwidClient", "__version__"]
