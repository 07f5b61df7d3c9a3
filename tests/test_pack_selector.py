from __future__ import annotations

import random

from pack_selector import PackSelector


def test_sequential_wraps_around():
    sel = PackSelector(3, random_order=False)
    assert [sel.pick_next_index(i) for i in range(3)] == [1, 2, 0]


def test_random_never_returns_excluded():
    sel = PackSelector(3, random_order=True, rng=random.Random(7))
    for exclude in range(3):
        for _ in range(200):
            assert sel.pick_next_index(exclude) != exclude


def test_random_two_packs_always_the_other():
    sel = PackSelector(2, rng=random.Random(1))
    assert {sel.pick_next_index(0) for _ in range(50)} == {1}


def test_single_pack_returns_itself():
    sel = PackSelector(1, random_order=True)
    assert sel.pick_next_index(0) == 0


def test_random_reaches_every_other_index():
    sel = PackSelector(4, rng=random.Random(3))
    assert {sel.pick_next_index(2) for _ in range(300)} == {0, 1, 3}
