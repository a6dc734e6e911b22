# tests/integration/cursor/test_int_reiterator_scenarios.py - v1
"""End-to-end walks through a Reiterator and its cache.

Coverage targets: reiterator.py, indexed.py, memo_cache.py
"""

from __future__ import annotations

import random

import pytest

from reiterator import Indexed, index, reiterate, value
from reiterator.config.settings import Settings


class TestLetterWalk:
    def test_full_walk(self, abc_source):
        it = reiterate(abc_source)

        first = it.current()
        assert first == Indexed(index=0, value="a")
        again = it.current()
        assert again == first
        assert again.value is first.value

        assert it.step() == Indexed(index=0, value="a")
        assert it.index == 1
        assert it.current() == Indexed(index=1, value="b")
        assert it.step() == Indexed(index=1, value="b")
        assert it.step() == Indexed(index=2, value="c")
        assert it.step() is None

        it.restart()
        replay = it.step()
        assert replay == Indexed(index=0, value="a")
        assert replay.value is first.value
        assert abc_source.calls == 4

    def test_start_from_anywhere(self):
        it = reiterate("abc")
        it.index = 1
        assert it.current() == Indexed(index=1, value="b")
        assert it.step() == Indexed(index=1, value="b")
        assert it.current() == Indexed(index=2, value="c")
        assert it.peek_at(1) == Indexed(index=1, value="b")
        assert it.peek_at(3) is None


class TestFetchAdvanceEquivalence:
    @pytest.mark.parametrize("n", [0, 1, 2, 17, 256])
    def test_n_steps_then_absent(self, n: int):
        it = reiterate(range(n))
        pairs = [it.step() for _ in range(n)]
        assert [p.index for p in pairs] == list(range(n))
        assert [p.value for p in pairs] == list(range(n))
        assert it.step() is None


class TestRestartIdempotence:
    @pytest.mark.parametrize("backend", ["boxed", "chunked"])
    def test_replay_is_identical(self, backend: str, make_box):
        settings = Settings(_env_file=None, store_backend=backend, chunk_size=5)
        it = reiterate((make_box(i) for i in range(256)), settings=settings)
        first_pass = list(it)
        it.restart()
        second_pass = list(it)
        assert len(first_pass) == 256
        assert first_pass == second_pass
        assert all(a.value is b.value for a, b in zip(first_pass, second_pass))

    @pytest.mark.parametrize("seed", range(5))
    def test_random_moves_reuse_objects(self, seed: int, make_box, make_source):
        rng = random.Random(seed)
        source = make_source(make_box(i) for i in range(40))
        it = reiterate(source)
        seen: dict[int, object] = {}
        for _ in range(300):
            action = rng.choice(["step", "peek", "seek", "restart"])
            if action == "step":
                got = it.step()
            elif action == "peek":
                got = it.peek_at(rng.randint(0, 50))
            elif action == "seek":
                it.seek(rng.randint(0, 50))
                got = it.current()
            else:
                it.restart()
                got = it.current()
            if got is not None:
                assert got.value.n == got.index
                assert seen.setdefault(got.index, got.value) is got.value
        assert source.calls <= 41


class TestCombinators:
    def test_index_and_value_maps(self):
        assert list(map(index, reiterate("xyz"))) == [0, 1, 2]
        assert list(map(value, reiterate("xyz"))) == ["x", "y", "z"]

    def test_map_pair_to_other_type(self):
        rendered = [f"{p.index}:{p.value}" for p in reiterate("ab")]
        assert rendered == ["0:a", "1:b"]
