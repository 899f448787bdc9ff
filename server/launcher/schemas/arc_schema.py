from typing import Any, List, Set, Tuple

from pydantic import AliasChoices, BaseModel, Field, model_validator


class CacheEntryModel(BaseModel):
    """Persisted form of one cache entry (live or ghost)."""
    key: str
    payload: Any = Field(None, validation_alias=AliasChoices("payload", "value"))
    last_accessed_at: float = Field(
        ..., ge=0,
        validation_alias=AliasChoices("last_accessed_at", "lastAccessedAt", "lastAccessed"),
    )
    access_count: int = Field(
        ..., ge=1,
        validation_alias=AliasChoices("access_count", "accessCount"),
    )


EntryPair = Tuple[str, CacheEntryModel]


class ArcSnapshot(BaseModel):
    """
    Serializable recommendation-cache state.

    Lists are ordered least- to most-recently used. Older launcher builds wrote
    camelCase entry fields (``lastAccessed``, ``accessCount``, ``value``);
    those are accepted on load.
    """
    t1: List[EntryPair]
    t2: List[EntryPair]
    b1: List[EntryPair]
    b2: List[EntryPair]
    p: int = Field(..., ge=0)
    capacity: int = Field(..., ge=1)

    @model_validator(mode="after")
    def _check_invariants(self) -> "ArcSnapshot":
        if self.p > self.capacity:
            raise ValueError(f"p={self.p} exceeds capacity={self.capacity}")

        seen: Set[str] = set()
        for name in ("t1", "t2", "b1", "b2"):
            for key, entry in getattr(self, name):
                if entry.key != key:
                    raise ValueError(f"{name}: pair key {key!r} != entry key {entry.key!r}")
                if key in seen:
                    raise ValueError(f"key {key!r} appears more than once")
                seen.add(key)

        if len(self.t1) + len(self.b1) > self.capacity:
            raise ValueError("|T1| + |B1| exceeds capacity")
        if len(seen) > 2 * self.capacity:
            raise ValueError("directory exceeds 2 * capacity")
        return self
