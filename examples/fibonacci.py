import sys
import os

# Add the project root to the path so we can import mnds
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from mnds import IntRing, Matrix, ModRing

MOD = 1_000_000_007

def fibonacci(n):
    M = Matrix[IntRing, 2].from_rows([[1, 1], [1, 0]])
    return M.pow(n)[0, 1]

def fibonacci_mod(n, modulus=MOD):
    M = Matrix[ModRing(modulus), 2].from_rows([[1, 1], [1, 0]])
    return M.pow(n)[0, 1]

def main():
    for n in (0, 1, 2, 10, 50, 90):
        print(f"F({n}) = {fibonacci(n)}")
    n = 10 ** 18
    print(f"F({n}) mod {MOD} = {fibonacci_mod(n)}")

if __name__ == "__main__":
    main()
