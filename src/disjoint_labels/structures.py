"""Basic data structures."""

from __future__ import annotations

from typing import Dict, List

import numpy as np


class LabelOutOfRangeError(IndexError):
    """Raised when a label was never assigned by :meth:`DisjointSet.add`."""

    def __init__(self, label: int, size: int) -> None:
        super().__init__(f"label {label} is out of range for a set of {size} elements")
        self.label = label
        self.size = size


class DisjointSet:
    """Union-find over dense integer labels with path compression.

    Labels are handed out by :meth:`add` as ``0, 1, 2, ...``. Merging always
    keeps the numerically smaller root, so every root is the smallest label of
    its partition and ``find(i) <= i`` holds at all times.

    The structure is not thread safe. :meth:`find` rewires the parent table
    even though it answers a query, so callers sharing one instance between
    threads must guard every call with a single external lock.

    Example::

        sets = DisjointSet(4)   # parents [0, 1, 2, 3]
        sets.merge(2, 3)        # parents [0, 1, 2, 2]
        sets.merge(1, 2)        # parents [0, 1, 1, 2]
        sets.merge(0, 2)        # parents [0, 0, 1, 2]
        sets.find(3)            # 0, parents now [0, 0, 0, 0]
    """

    __slots__ = ("_parent",)

    def __init__(self, size: int = 0) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self._parent: List[int] = list(range(size))

    def __len__(self) -> int:
        return len(self._parent)

    def __contains__(self, label: object) -> bool:
        if not isinstance(label, (int, np.integer)) or isinstance(label, bool):
            return False
        return 0 <= label < len(self._parent)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={len(self)}, count={self.count})"

    def add(self) -> int:
        """Add a new singleton set and return its label."""

        label = len(self._parent)
        self._parent.append(label)
        return label

    def find(self, label: int) -> int:
        """Return the root label of the set containing `label`."""

        label = self._check(label)
        parent = self._parent
        root = label
        while parent[root] != root:
            root = parent[root]

        # Second pass points every node on the path straight at the root.
        while parent[label] != root:
            parent[label], label = root, parent[label]
        return root

    def merge(self, x: int, y: int) -> None:
        """Merge the sets containing `x` and `y`; the smaller root survives."""

        if x == y:
            self._check(x)
            return

        a = self.find(x)
        b = self.find(y)
        if a == b:
            return
        if a < b:
            self._parent[b] = a
        else:
            self._parent[a] = b

    def flatten(self, min_label=0) -> list:
        """Map every label to a consecutive set label starting at `min_label`.

        Set labels are "lost" as sets are merged: merging 1 and 2 out of
        ``[0, 1, 2, 3]`` leaves roots ``[0, 1, 1, 3]``. The returned lookup
        table renumbers the surviving sets densely, so with ``min_label=1``
        that example gives ``[1, 2, 2, 3]``. Output values have the type of
        `min_label`. The table is stale after the next :meth:`merge`.
        """

        out: list = []
        for i in range(len(self._parent)):
            j = self.find(i)
            if j == i:
                out.append(min_label)
                min_label += 1
            else:
                out.append(out[j])
        return out

    def flatten_array(self, min_label: int = 0, dtype=np.int64) -> np.ndarray:
        """Return :meth:`flatten` as a one-dimensional array of `dtype`."""

        return np.asarray(self.flatten(min_label), dtype=dtype)

    def same(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)

    def roots(self) -> List[int]:
        return [i for i in range(len(self._parent)) if self._parent[i] == i]

    @property
    def count(self) -> int:
        """Number of distinct sets."""

        return sum(1 for i, parent in enumerate(self._parent) if parent == i)

    def groups(self) -> Dict[int, List[int]]:
        """Return root -> ascending member labels for every set."""

        groups: Dict[int, List[int]] = {}
        for index in range(len(self._parent)):
            groups.setdefault(self.find(index), []).append(index)
        return groups

    def parents(self) -> List[int]:
        """Return a copy of the parent table."""

        return list(self._parent)

    def _check(self, label: int) -> int:
        if not isinstance(label, (int, np.integer)) or isinstance(label, bool):
            raise TypeError(f"labels must be integers, not {type(label).__name__}")
        if not 0 <= label < len(self._parent):
            raise LabelOutOfRangeError(label, len(self._parent))
        return int(label)
