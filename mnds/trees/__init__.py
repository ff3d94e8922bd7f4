from .segment_tree import SegmentTree, SumSegmentTree, MaxSegmentTree, MinSegmentTree
