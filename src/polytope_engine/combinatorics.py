"""
Combinatorial generators used by the polytope families.

- Permutations and signed permutations of a coordinate tuple (permutahedra,
  orbit polytopes).
- Triangulations of a convex polygon (associahedron vertices).

Outputs are plain tuples so they can be hashed, compared and fed directly to
`jnp.asarray`.
"""

from functools import lru_cache
from itertools import product
from typing import List, Sequence, Tuple


Triangle = Tuple[int, int, int]
Triangulation = Tuple[Triangle, ...]


def permutations(values: Sequence) -> List[tuple]:
    """All n! orderings of values.

    Built recursively: pick each element in turn as the head and prepend it to
    every permutation of the remaining elements. Repeated values are not
    collapsed, so the result always has n! entries.
    """
    values = tuple(values)
    if len(values) <= 1:
        return [values]

    result = []
    for i, head in enumerate(values):
        rest = values[:i] + values[i + 1:]
        for tail in permutations(rest):
            result.append((head,) + tail)
    return result


def signed_permutations(values: Sequence) -> List[tuple]:
    """Every permutation of values combined with every coordinate-wise sign choice.

    Returns:
        n! * 2^n tuples
    """
    values = tuple(values)
    sign_choices = list(product((-1, 1), repeat=len(values)))
    return [
        tuple(v * s for v, s in zip(perm, signs))
        for perm in permutations(values)
        for signs in sign_choices
    ]


@lru_cache(maxsize=None)
def _triangulations(i: int, j: int) -> Tuple[Triangulation, ...]:
    if j <= i + 1:
        return ((),)

    result = []
    for k in range(i + 1, j):
        for left in _triangulations(i, k):
            for right in _triangulations(k, j):
                result.append(left + right + ((i, k, j),))
    return tuple(result)


def triangulations(i: int, j: int) -> List[List[Triangle]]:
    """All triangulations of the convex polygon on consecutive vertices i..j.

    Classical recursive split: the edge (i, j) lies in exactly one triangle
    (i, k, j); each choice of k combines a triangulation of i..k with one of
    k..j. The count grows like the Catalan numbers (a hexagon, 0..5, has 14).

    Args:
        i: First polygon vertex index
        j: Last polygon vertex index

    Returns:
        List of triangulations, each a list of (i, k, j) triangles
    """
    return [list(t) for t in _triangulations(i, j)]
