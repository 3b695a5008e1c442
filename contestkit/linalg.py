"""Gaussian elimination over the reals and matrices over the integers modulo m."""

from __future__ import annotations

from collections.abc import Sequence

EPS = 1e-8


def gauss_solve(augmented: Sequence[Sequence[float]]) -> list[float]:
    """Solve a square linear system given as ``n`` rows of ``n + 1`` numbers.

    Raises ValueError if the system has no solution or infinitely many.
    """
    a = [[float(v) for v in row] for row in augmented]
    n = len(a)
    if any(len(row) != n + 1 for row in a):
        raise ValueError("augmented matrix must have n rows of n + 1 values")
    for i in range(n):
        pivot = next((j for j in range(i, n) if abs(a[j][i]) > EPS), None)
        if pivot is not None and pivot != i:
            a[i], a[pivot] = a[pivot], a[i]
        if abs(a[i][i]) < EPS:
            continue
        for j, row in enumerate(a):
            if j != i and abs(row[i]) > EPS:
                factor = row[i] / a[i][i]
                for k in range(i, n + 1):
                    row[k] -= a[i][k] * factor
    solution = []
    for i, row in enumerate(a):
        if abs(row[i]) < EPS:
            if abs(row[n]) > EPS:
                raise ValueError("the system has no solution")
            raise ValueError("the system has infinitely many solutions")
        value = row[n] / row[i]
        solution.append(0.0 if abs(value) < EPS else value)
    return solution


def sphere_center(points: Sequence[Sequence[float]]) -> list[float]:
    """Centre of the n-dimensional sphere through ``n + 1`` points."""
    if not points:
        raise ValueError("at least one point is required")
    first, *rest = points
    n = len(first)
    if len(rest) != n or any(len(p) != n for p in rest):
        raise ValueError("need n + 1 points of dimension n")
    rows = []
    for p in rest:
        coeffs = [2 * (p[j] - first[j]) for j in range(n)]
        rhs = sum(p[j] ** 2 - first[j] ** 2 for j in range(n))
        rows.append(coeffs + [rhs])
    return gauss_solve(rows)


class ModMatrix:
    """A square matrix with entries reduced modulo ``modulus``."""

    def __init__(self, rows: Sequence[Sequence[int]], modulus: int) -> None:
        if modulus <= 0:
            raise ValueError("modulus must be positive")
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise ValueError("matrix must be square")
        self.modulus = modulus
        self.rows = [[v % modulus for v in row] for row in rows]

    @classmethod
    def identity(cls, size: int, modulus: int) -> "ModMatrix":
        return cls([[int(i == j) for j in range(size)] for i in range(size)], modulus)

    def __len__(self) -> int:
        return len(self.rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModMatrix):
            return NotImplemented
        return self.modulus == other.modulus and self.rows == other.rows

    def __repr__(self) -> str:
        return f"ModMatrix({self.rows!r}, {self.modulus})"

    def __mul__(self, other: "ModMatrix") -> "ModMatrix":
        if not isinstance(other, ModMatrix):
            return NotImplemented
        if other.modulus != self.modulus or len(other) != len(self):
            raise ValueError("matrices must share size and modulus")
        columns = list(zip(*other.rows))
        return ModMatrix(
            [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in self.rows],
            self.modulus,
        )

    def __pow__(self, exponent: int) -> "ModMatrix":
        if exponent < 0:
            raise ValueError("exponent must be non-negative")
        result = ModMatrix.identity(len(self), self.modulus)
        square = self
        while exponent:
            if exponent & 1:
                result = result * square
            square = square * square
            exponent >>= 1
        return result

    def determinant(self) -> int:
        """Determinant modulo a prime modulus."""
        mod = self.modulus
        a = [row[:] for row in self.rows]
        n = len(a)
        result = 1
        for i in range(n):
            pivot = next((j for j in range(i, n) if a[j][i]), None)
            if pivot is None:
                return 0
            if pivot != i:
                a[i], a[pivot] = a[pivot], a[i]
                result = -result
            inverse = pow(a[i][i], -1, mod)
            for j in range(i + 1, n):
                factor = a[j][i] * inverse % mod
                if factor:
                    for k in range(i, n):
                        a[j][k] = (a[j][k] - a[i][k] * factor) % mod
            result = result * a[i][i] % mod
        return result % mod


def lcg_term(m: int, a: int, c: int, x0: int, n: int, g: int) -> int:
    """``x_n mod g`` for the generator ``x_{k+1} = (a * x_k + c) mod m``."""
    step = ModMatrix([[a, 1], [0, 1]], m) ** n
    start = ModMatrix([[x0, 0], [c, 0]], m)
    return (step * start).rows[0][0] % g