from .ST import SegmentTree, SegmentTreeError, InvalidRange, EmptyInput

__all__ = ['SegmentTree', 'SegmentTreeError', 'InvalidRange', 'EmptyInput']
