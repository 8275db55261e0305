"""
Learning Sorter — composite multi-criterion ordering over learning indexes.

Typical cycle:
  1. Build a comparator for the criteria of interest (get_comparer).
  2. Sort the dataset with the host sort.
  3. Re-index the dataset so the order just established becomes the
     remembered baseline for the next sort.

The sorter never sorts by itself beyond delegating to ``sorted``.
"""

import logging
from functools import cmp_to_key
from typing import Callable, Dict, List, Optional, Sequence

from learning_sorter.models.comparer import Comparer, SortConfig
from learning_sorter.models.settings import SorterSettings
from learning_sorter.ranking.compare import CompareFn, KeyFn
from learning_sorter.ranking.index import LearningIndex

logger = logging.getLogger(__name__)


class SortConfigurationError(ValueError):
    """Raised when comparers or a sort config cannot be resolved."""
    pass


class LearningSorter:
    """
    Owns one LearningIndex per registered comparer. The set of indexes
    is fixed at construction.
    """

    def __init__(
        self,
        item_to_key: KeyFn,
        comparers: Sequence[Comparer],
        settings: Optional[SorterSettings] = None,
    ):
        self.settings = settings or SorterSettings()
        self._item_to_key = item_to_key
        self._indexes: Dict[str, LearningIndex] = {}

        for comparer in comparers:
            if comparer.name in self._indexes:
                if self.settings.reject_duplicate_names:
                    raise SortConfigurationError(
                        f"Duplicate comparer name: {comparer.name!r}"
                    )
                logger.debug("Comparer %r replaces an earlier one", comparer.name)
            self._indexes[comparer.name] = LearningIndex(
                item_to_key,
                comparer.compare,
                name=comparer.name,
                reorder_dataset=self.settings.reorder_dataset,
            )

        logger.debug("LearningSorter initialized with criteria %s", self.names)

    @property
    def names(self) -> List[str]:
        """Registered comparer names, in registration order."""
        return list(self._indexes)

    def get_index(self, name: str) -> LearningIndex:
        index = self._indexes.get(name)
        if index is None:
            raise SortConfigurationError(f"No comparer registered as {name!r}")
        return index

    def __contains__(self, name: str) -> bool:
        return name in self._indexes

    def get_comparer(self, config: SortConfig) -> CompareFn:
        """
        Build a lexicographic comparator from a sort config.

        Registered names resolve to their learning index; unregistered
        Comparer entries are used as given, without learning. Each result
        is negated for descending criteria and the first non-zero one wins.
        """
        compare_fns = [self._resolve(entry) for entry in config.comparers]
        multipliers = [1 if ascending else -1 for ascending in config.orders]
        criteria = list(zip(compare_fns, multipliers))

        logger.debug(
            "Built comparator for %s",
            [
                f"{name} {'asc' if m > 0 else 'desc'}"
                for name, m in zip(config.names, multipliers)
            ],
        )

        def composite(a, b) -> int:
            for compare_fn, multiplier in criteria:
                result = compare_fn(a, b)
                if result != 0:
                    return result * multiplier
            return 0

        return composite

    def get_key(self, config: SortConfig) -> Callable:
        """Key function for ``list.sort`` / ``sorted`` built from get_comparer."""
        return cmp_to_key(self.get_comparer(config))

    def sort(self, dataset: Sequence, config: SortConfig) -> list:
        """Return a new list ordered by the config. Does not re-index."""
        return sorted(dataset, key=self.get_key(config))

    def index_dataset_lazily(self, dataset: Sequence) -> None:
        """Schedule the dataset for deferred indexing on every criterion."""
        for index in self._indexes.values():
            index.index_dataset_lazily(dataset)

    def index_dataset(self, dataset: Sequence) -> None:
        """Index the dataset now on every criterion, in registration order."""
        for index in self._indexes.values():
            index.index_dataset(dataset)

    def _resolve(self, entry) -> CompareFn:
        if isinstance(entry, str):
            return self.get_index(entry).compare_fn
        index = self._indexes.get(entry.name)
        if index is not None:
            return index.compare_fn
        return entry.compare
