from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class MatchKind(str, Enum):
    """How a query matched a field value."""
    EXACT  = "exact"
    PREFIX = "prefix"
    FUZZY  = "fuzzy"


class Candidate(BaseModel):
    """One launchable item as delivered by the app scanner."""
    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1)
    name: str = ""
    source: Optional[str] = None       # origin tag, e.g. "shortcut", "registry", "uwp"
    launch_path: Optional[str] = None

    # Secondary ranking data supplied by the caller
    launch_count: int = Field(0, ge=0)
    last_launched_at: Optional[float] = None

    def match_fields(self) -> Iterator[Tuple[str, str]]:
        """Yield ``(field, value)`` in importance order, skipping empty values."""
        for field in ("name", "source", "launch_path"):
            value = getattr(self, field)
            if value:
                yield field, value


@dataclass(frozen=True)
class FieldMatch:
    """Score of a query against a single field value."""
    match_kind: MatchKind
    base_cost: int


@dataclass(frozen=True)
class MatchResult:
    """Best match of a query against a candidate."""
    field: str
    match_kind: MatchKind
    base_cost: int
    field_weight: int

    @property
    def total_cost(self) -> int:
        return self.base_cost + self.field_weight

    @property
    def rank_key(self) -> Tuple[int, int, int]:
        return (self.total_cost, self.base_cost, self.field_weight)
