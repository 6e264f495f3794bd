"""Domain models and entities.

Plain, strict data structures (Pydantic v2). The domain knows nothing about
HTTP, the CLI or the Zoom SDK conventions beyond field aliases.
"""

from core.domain.models import AccountUser, LicenseTier, SwapResult, SwapRole

__all__ = ["AccountUser", "LicenseTier", "SwapResult", "SwapRole"]
