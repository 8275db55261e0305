"""
Learning Index — remembered ordering for a single comparison criterion.

Each indexing pass sorts a dataset and records every item's position as its
learned rank. Later comparisons between two ranked items use the ranks
instead of the (possibly expensive) base rule. Items the index has never
seen fall back to the base rule.

Indexing can be eager (``index_dataset``) or deferred until the first
comparison that needs it (``index_dataset_lazily``).
"""

import logging
from functools import cmp_to_key
from typing import Dict, List, Optional, Sequence

from learning_sorter.models.index import IndexSnapshot
from learning_sorter.ranking.compare import CompareFn, KeyFn, compare_numbers

logger = logging.getLogger(__name__)


class LearningIndex:
    """
    Maps item keys to the rank they held after the last indexing pass.
    The mapping is replaced wholesale by every pass, never patched.
    """

    def __init__(
        self,
        item_to_key: KeyFn,
        compare: CompareFn,
        name: str = "",
        reorder_dataset: bool = True,
    ):
        self.name = name
        self.reorder_dataset = reorder_dataset
        self._item_to_key = item_to_key
        self._base_compare = compare
        self._ranks: Dict[str, int] = {}
        self._pending: Optional[List] = None

        self.compare_fn: CompareFn = self.compare

    def compare(self, a, b) -> int:
        """Order two items by learned rank, pending dataset, or base rule."""
        rank_a = self._ranks.get(self._item_to_key(a))
        rank_b = self._ranks.get(self._item_to_key(b))
        if rank_a is not None and rank_b is not None:
            return compare_numbers(rank_a, rank_b)

        if self._pending is not None:
            logger.debug(
                "Index %r: consuming pending dataset of %d items",
                self.name, len(self._pending),
            )
            # Stays pending if the pass raises
            self._index(self._pending, write_back=False)
            self._pending = None
            return self._compare_with(self._ranks, a, b)

        return self._base_compare(a, b)

    def index_dataset_lazily(self, dataset: Sequence) -> None:
        """
        Schedule a dataset for indexing on the next comparison that needs it.
        Replaces any dataset already pending.

        The dataset's membership is captured now: items appended to the list
        after scheduling are not indexed by the deferred pass. Mutations of
        the items themselves are still seen.
        """
        if self._pending is not None:
            logger.debug("Index %r: discarding unconsumed pending dataset", self.name)
        # Membership is fixed now; a caller sorting the same list in place
        # would otherwise hand us an emptied list mid-sort.
        self._pending = list(dataset)

    def index_dataset(self, dataset: Sequence) -> None:
        """
        Index a dataset now. The learned order evolves from the previous one:
        pairs that were both ranked keep their old relative order, all other
        pairs are ordered by the base rule. A list passed in is reordered in
        place to match.
        """
        self._index(dataset, write_back=self.reorder_dataset)

    def rank_of(self, item) -> Optional[int]:
        """Get the learned rank of an item, or None if it is not indexed."""
        return self._ranks.get(self._item_to_key(item))

    def is_indexed(self, item) -> bool:
        return self.rank_of(item) is not None

    @property
    def has_pending(self) -> bool:
        return self._pending is not None

    def clear(self) -> None:
        """Forget the learned order and any pending dataset."""
        self._ranks = {}
        self._pending = None

    def snapshot(self) -> IndexSnapshot:
        return IndexSnapshot(
            name=self.name,
            ranks=dict(self._ranks),
            size=len(self._ranks),
            has_pending=self.has_pending,
        )

    def __len__(self) -> int:
        return len(self._ranks)

    def __repr__(self) -> str:
        return f"LearningIndex(name={self.name!r}, size={len(self._ranks)})"

    # --- Internals ---

    def _index(self, dataset: Sequence, write_back: bool) -> None:
        old_ranks = self._ranks
        ordered = sorted(
            dataset,
            key=cmp_to_key(lambda a, b: self._compare_with(old_ranks, a, b)),
        )

        ranks: Dict[str, int] = {}
        for position, item in enumerate(ordered):
            key = self._item_to_key(item)
            if key in ranks:
                logger.debug(
                    "Index %r: key collision on %r, rank %d replaces %d",
                    self.name, key, position, ranks[key],
                )
            ranks[key] = position

        self._ranks = ranks
        if write_back and isinstance(dataset, list):
            dataset[:] = ordered

        logger.debug("Index %r: indexed %d items", self.name, len(ordered))

    def _compare_with(self, ranks: Dict[str, int], a, b) -> int:
        """Compare by the given ranks if both items have one, else by base rule."""
        rank_a = ranks.get(self._item_to_key(a))
        rank_b = ranks.get(self._item_to_key(b))
        if rank_a is not None and rank_b is not None:
            return compare_numbers(rank_a, rank_b)
        return self._base_compare(a, b)
