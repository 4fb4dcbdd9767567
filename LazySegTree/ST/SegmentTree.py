import logging
import numbers

import numpy as np
import pandas as pd

from .errors import InvalidRange, EmptyInput

logger = logging.getLogger(__name__)

# Number of node slots allocated per point. Always enough for any split pattern.
SPACE_FACTOR = 4


class SegmentTree(object):
    """
    A segment tree over the closed integer range ``[left_bound, right_bound]``
    maintaining range sums under range-additive updates.
    Adding a value to every point of a range is O(log n).
    Calculating the sum of a range is O(log n).
    Retrieving a single value is a special case of calculating a range sum, and
    is thus O(log n).

    The tree is stored in two lists indexed like a complete binary tree: the
    node ``i`` has its children at ``2i`` and ``2i+1`` and the root is ``1``.
    ``_tree`` holds the sum of the node's range and ``_tags`` a pending per-point
    delta (lazy tag) already counted in ``_tree[i]`` but not yet in the children.
    Tags are pushed one level down whenever an operation has to visit the
    children of a tagged node.

    :param int left_bound:
        Smallest valid index.

    :param int right_bound:
        Largest valid index, at least ``left_bound``.

    .. rubric:: Notes

    - All points start at zero. Use :meth:`from_values` to start from a sequence.
    - Ranges are inclusive on both ends. Out-of-range or reversed ranges raise
      :class:`InvalidRange` before any state is modified.
    """
    def __init__(self, left_bound, right_bound):
        left_bound = _as_index(left_bound)
        right_bound = _as_index(right_bound)
        if left_bound > right_bound:
            logger.debug("Rejected bounds [%d, %d]", left_bound, right_bound)
            raise InvalidRange(left_bound, right_bound)
        self._left_bound = left_bound
        self._right_bound = right_bound
        space = self._space_needed()
        self._tree = [0] * space
        self._tags = [0] * space
        logger.debug("Created segment tree over [%d, %d] with %d slots",
                     left_bound, right_bound, len(self._tree))

    @classmethod
    def from_values(cls, values):
        """
        Builds a tree over ``[0, len(values)-1]`` holding ``values``, in O(n).

        :param values: one-dimensional sequence, array or iterable of numbers.
        :returns: a new :class:`SegmentTree`.
        :raises EmptyInput: if ``values`` is empty.
        :raises ValueError: if ``values`` is not one-dimensional.
        """
        if hasattr(values, '__iter__') and not hasattr(values, '__len__'):
            values = list(values)
        if np.ndim(values) != 1:
            raise ValueError("expected a one-dimensional sequence, got {0} dimensions".format(np.ndim(values)))
        # numpy data goes back to Python numbers, other elements are kept as given
        if isinstance(values, np.ndarray):
            values = values.tolist()
        else:
            values = [_as_number(v) for v in values]
        if len(values) == 0:
            raise EmptyInput()
        tree = cls(0, len(values) - 1)
        tree._build(1, tree._left_bound, tree._right_bound, values)
        return tree

    @property
    def left_bound(self):
        return self._left_bound

    @property
    def right_bound(self):
        return self._right_bound

    def __len__(self):
        return self._right_bound - self._left_bound + 1

    def _space_needed(self):
        return SPACE_FACTOR * len(self)

    def _build(self, idx, left_bound, right_bound, values):
        if left_bound == right_bound:
            self._tree[idx] = values[left_bound]
            return
        mid = left_bound + (right_bound - left_bound) // 2
        self._build(idx * 2, left_bound, mid, values)
        self._build(idx * 2 + 1, mid + 1, right_bound, values)
        self._tree[idx] = self._tree[idx * 2] + self._tree[idx * 2 + 1]

    def _push_down(self, idx, left_bound, mid, right_bound):
        """ Moves the lazy tag of the internal node ``idx`` to its two children. """
        tag = self._tags[idx]
        if tag == 0 or left_bound == right_bound:
            return
        self._tags[idx * 2] += tag
        self._tags[idx * 2 + 1] += tag
        self._tree[idx * 2] += tag * (mid - left_bound + 1)
        self._tree[idx * 2 + 1] += tag * (right_bound - mid)
        self._tags[idx] = 0

    def _check_range(self, left, right):
        left = _as_index(left)
        right = _as_index(right)
        if left > right or left < self._left_bound or right > self._right_bound:
            logger.debug("Rejected range [%d, %d] on tree over [%d, %d]",
                         left, right, self._left_bound, self._right_bound)
            raise InvalidRange(left, right, self._left_bound, self._right_bound)
        return left, right

    def _add(self, value, idx, left, right, left_bound, right_bound):
        # the node's range is covered: update it and leave a tag for the children
        if left <= left_bound and right_bound <= right:
            self._tree[idx] += value * (right_bound - left_bound + 1)
            self._tags[idx] += value
            return

        mid = left_bound + (right_bound - left_bound) // 2
        self._push_down(idx, left_bound, mid, right_bound)

        if left <= mid:
            self._add(value, idx * 2, left, right, left_bound, mid)
        if right >= mid + 1:
            self._add(value, idx * 2 + 1, left, right, mid + 1, right_bound)

        self._tree[idx] = self._tree[idx * 2] + self._tree[idx * 2 + 1]

    def _get_sum(self, idx, left, right, left_bound, right_bound):
        if left <= left_bound and right_bound <= right:
            return self._tree[idx]

        mid = left_bound + (right_bound - left_bound) // 2
        self._push_down(idx, left_bound, mid, right_bound)

        _sum = 0
        if left <= mid:
            _sum += self._get_sum(idx * 2, left, right, left_bound, mid)
        if right >= mid + 1:
            _sum += self._get_sum(idx * 2 + 1, left, right, mid + 1, right_bound)
        return _sum

    def add(self, value, left, right):
        """ Adds ``value`` to every point of ``[left, right]``. """
        left, right = self._check_range(left, right)
        value = _as_number(value)
        self._add(value, 1, left, right, self._left_bound, self._right_bound)

    def get_sum(self, left, right):
        """ Returns the sum of the points of ``[left, right]``. """
        left, right = self._check_range(left, right)
        return self._get_sum(1, left, right, self._left_bound, self._right_bound)

    def __getitem__(self, idx):
        return self.get_sum(idx, idx)

    def __setitem__(self, idx, value):
        # Two traversals; prefer add() when the delta is already known.
        self.add(_as_number(value) - self[idx], idx, idx)

    def _collect(self, idx, left_bound, right_bound, out):
        if left_bound == right_bound:
            out.append(self._tree[idx])
            return
        mid = left_bound + (right_bound - left_bound) // 2
        self._push_down(idx, left_bound, mid, right_bound)
        self._collect(idx * 2, left_bound, mid, out)
        self._collect(idx * 2 + 1, mid + 1, right_bound, out)

    def values(self):
        """ Retrieves all point values in index order in O(n). """
        _values = []
        self._collect(1, self._left_bound, self._right_bound, _values)
        return _values

    def to_series(self):
        """
        Returns the point values as a :class:`pandas.Series` indexed by point index.

        :rtype: pandas.Series
        """
        index = pd.RangeIndex(self._left_bound, self._right_bound + 1, name='index')
        return pd.Series(self.values(), index=index, name='value')

    def __eq__(self, other):
        return (isinstance(other, SegmentTree)
                and self._left_bound == other._left_bound
                and self._right_bound == other._right_bound
                and self.values() == other.values())

    def __repr__(self):
        return "SegmentTree(left_bound={0}, right_bound={1})".format(self._left_bound, self._right_bound)


def _as_index(bound):
    if not isinstance(bound, numbers.Integral):
        raise TypeError("indices must be integers, not {0}".format(type(bound).__name__))
    return int(bound)


def _as_number(value):
    # numpy scalars wrap around at their fixed width
    if isinstance(value, np.generic):
        return value.item()
    return value
