# src/cache/models.py - v1
"""Cache domain models: CacheInfo."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CacheInfo(BaseModel):
    """Point-in-time statistics of a memoizing cache."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    backend: str
    materialized: int = 0
    pulls: int = 0
    source_calls: int = 0
    exhausted: bool = False

    @property
    def is_empty(self) -> bool:
        """True iff nothing has been materialized yet."""
        return self.materialized == 0
