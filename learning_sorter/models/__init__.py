"""Learning sorter data models."""

from learning_sorter.models.comparer import Comparer, SortConfig
from learning_sorter.models.index import IndexSnapshot
from learning_sorter.models.settings import SorterSettings

__all__ = [
    "Comparer",
    "IndexSnapshot",
    "SortConfig",
    "SorterSettings",
]
