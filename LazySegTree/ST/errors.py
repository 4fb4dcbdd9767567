class SegmentTreeError(Exception):
    """ Base class for errors raised by :class:`SegmentTree`. """


class InvalidRange(SegmentTreeError, IndexError):
    """
    Raised when a range is reversed or falls outside the bounds of the tree.

    :param int left: left end of the requested range.
    :param int right: right end of the requested range.
    :param int or None left_bound: left bound of the tree, if known.
    :param int or None right_bound: right bound of the tree, if known.
    """
    def __init__(self, left, right, left_bound=None, right_bound=None):
        self.left = left
        self.right = right
        self.left_bound = left_bound
        self.right_bound = right_bound
        if left > right:
            msg = "invalid range [{0}, {1}]: left end is greater than right end".format(left, right)
        else:
            msg = "range [{0}, {1}] is outside of [{2}, {3}]".format(left, right, left_bound, right_bound)
        super().__init__(msg)


class EmptyInput(SegmentTreeError, ValueError):
    """ Raised when a tree is built from an empty sequence of values. """
    def __init__(self, msg="cannot build a segment tree from an empty sequence"):
        super().__init__(msg)
