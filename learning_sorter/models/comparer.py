"""Comparer and SortConfig — the caller-facing description of a sort."""

from typing import Any, Callable, List, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Comparer(BaseModel):
    """A named comparison rule. Returns negative, zero or positive."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)         # Lookup key inside a sorter
    compare: Callable[[Any, Any], int]

    def __call__(self, a: Any, b: Any) -> int:
        return self.compare(a, b)


class SortConfig(BaseModel):
    """
    Criteria to apply in priority order, each with its own direction.

    Entries in ``comparers`` are either full Comparer objects or the bare
    name of a comparer registered with the sorter. ``orders[i]`` is True
    for ascending and False for descending.
    """

    comparers: List[Union[Comparer, str]]
    orders: List[bool]

    @model_validator(mode="after")
    def _check_lengths(self) -> "SortConfig":
        if len(self.comparers) != len(self.orders):
            raise ValueError(
                f"comparers and orders must have the same length "
                f"({len(self.comparers)} != {len(self.orders)})"
            )
        return self

    @classmethod
    def of(cls, *criteria: Tuple[Union[Comparer, str], bool]) -> "SortConfig":
        """Build a config from (comparer_or_name, ascending) pairs."""
        return cls(
            comparers=[c for c, _ in criteria],
            orders=[asc for _, asc in criteria],
        )

    @property
    def names(self) -> List[str]:
        return [c if isinstance(c, str) else c.name for c in self.comparers]
