"""Shared fixtures for the arena tree tests."""

import random

import pytest

from arenatree.arena_tree.tree import Tree


@pytest.fixture
def sample_tree():
    """Integer tree with repeated values at several depths.

    Ids and values:
        0: 10
        ├── 1: 1
        │   ├── 4: 2
        │   │   └── 6: 3
        │   └── 5: 3
        ├── 2: 2
        │   ├── 7: 4
        │   └── 8: 8
        └── 3: 5
    """
    return (
        Tree.new(10)
        .add(1, 0)
        .add(2, 0)
        .add(5, 0)
        .add(2, 1)
        .add(3, 1)
        .add(3, 4)
        .add(4, 2)
        .add(8, 2)
    )


@pytest.fixture
def pair_tree():
    """Same shape as sample_tree, holding pairs whose first component mirrors sample_tree's values."""
    return (
        Tree.new((0, 0))
        .add((1, 1), 0)
        .add((2, 2), 0)
        .add((5, 5), 0)
        .add((2, 2), 1)
        .add((3, 3), 1)
        .add((3, 8), 4)
        .add((4, 4), 2)
        .add((8, 8), 2)
    )


@pytest.fixture(params=range(5))
def random_tree(request):
    """Randomly shaped tree of 60 nodes where every value is the node's own id."""
    rng = random.Random(request.param)
    tree = Tree.new(0)
    for node_id in range(1, 60):
        tree.add(node_id, rng.randrange(node_id))
    return tree
