"""Core abstractions.

Protocols that concrete adapters implement, so the services depend on
contracts rather than on the HTTP client.
"""

from core.interfaces.directory import AccountDirectory

__all__ = ["AccountDirectory"]
