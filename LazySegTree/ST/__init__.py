from .SegmentTree import SegmentTree
from .errors import SegmentTreeError, InvalidRange, EmptyInput
