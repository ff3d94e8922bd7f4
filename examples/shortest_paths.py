import sys
import os

# Add the project root to the path so we can import mnds
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from mnds import DynMatrix, MinPlus

INF = float("inf")

def shortest_walks(weights, max_edges):
    # Zero diagonal lets a walk stay put, so the power bounds the edge count
    W = DynMatrix[MinPlus].from_rows(weights)
    return W.pow(max_edges)

def main():
    weights = [
        [0, 4, 10, INF],
        [INF, 0, 1, 7],
        [INF, INF, 0, 2],
        [INF, INF, INF, 0],
    ]
    for k in range(1, 4):
        dist = shortest_walks(weights, k)
        print(f"at most {k} edges: 0 -> 3 costs {dist[0, 3]}")

if __name__ == "__main__":
    main()
