"""
Adapters package for the video client.

Contains the HTTP transport the client issues its GET requests through.
Keep adapters thin: they encapsulate request execution and map upstream
failures to shared errors, nothing more.
"""

from .http_transport import HttpTransport, HttpxTransport

__all__ = [
    "HttpTransport",
    "HttpxTransport",
]
