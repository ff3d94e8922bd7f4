import sys
import os

# Add the project root to the path so we can import mnds
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from mnds import Concat, Interval, MaxSegmentTree, SegmentTree, SumSegmentTree

def main():
    data = [3, 1, 4, 1, 5, 9, 2, 6]

    sums = SumSegmentTree(data)
    print(f"sum of all = {sums.sum()}, sum[2, 5) = {sums.sum(2, 5)}")
    sums.update(4, 0)
    sums.add(0, 10)
    print(f"after update/add: {sums.values()} -> {sums.total}")

    maxes = MaxSegmentTree(float("-inf"), data)
    print(f"max[0, 3) = {maxes.max(0, 3)}, max of all = {maxes.max()}")

    words = SegmentTree.from_monoid(Concat, ["a", "b", "c", "d"])
    print(f"concat [1, 2] = {words.query(Interval(1, 2))!r}")
    words.update(1, "X")
    print(f"concat all = {words.total!r}")

if __name__ == "__main__":
    main()
