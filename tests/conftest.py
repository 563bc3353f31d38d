"""Pytest configuration and shared fixtures for undigraph tests.

This module provides:
- A deterministic numpy RNG fixture
- A factory fixture for random graphs used in cross-check tests
"""

import os
from typing import Callable

import numpy as np
import pytest

from undigraph.graphs import Graph, WeightedEdge


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function")
def random_graph(rng: np.random.Generator) -> Callable[..., Graph]:
    """Factory for random graphs over integer vertices 0..n-1.

    The graph always contains a random spanning path, so it is connected
    unless ``connected=False``. Extra edges may be parallel or self-loops.
    Weights are small integers so path sums are exact.
    """

    def _make(n_vertices: int, n_extra_edges: int, connected: bool = True) -> Graph:
        vertices = list(range(n_vertices))
        edges = []

        if connected:
            order = rng.permutation(n_vertices)
            for u, v in zip(order[:-1], order[1:]):
                edges.append(WeightedEdge(int(u), int(v), float(rng.integers(0, 10))))

        for _ in range(n_extra_edges):
            u, v = rng.integers(0, n_vertices, size=2)
            edges.append(WeightedEdge(int(u), int(v), float(rng.integers(0, 10))))

        return Graph(vertices, edges)

    return _make
