"""Index snapshot — read-only view of a LearningIndex."""

from typing import Dict

from pydantic import BaseModel


class IndexSnapshot(BaseModel):
    name: str
    ranks: Dict[str, int] = {}              # item key -> learned rank
    size: int = 0
    has_pending: bool = False
