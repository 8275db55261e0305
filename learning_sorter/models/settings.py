"""Sorter configuration."""

from pydantic import BaseModel


class SorterSettings(BaseModel):
    """Configuration for a LearningSorter."""

    reject_duplicate_names: bool = True     # False: later comparer wins
    reorder_dataset: bool = True            # Eager indexing rewrites the caller's list
