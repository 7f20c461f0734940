import pytest

import creation
from stream import LazyStream


class TestLazyEvaluation:
    """Test deferred execution and the chained operations"""

    def test_deferred_execution(self, call_counter):
        """Test that operations are not executed immediately"""
        track = call_counter(lambda x: x * 2)

        stream = creation.from_collection(range(10)).map(track)
        assert track.calls == 0, "Operations should not execute during definition"

        result = stream.limit(3).to_list()
        assert track.calls == 3, f"Expected exactly 3 calls, got {track.calls}"
        assert result == [0, 2, 4], f"Unexpected result: {result}"

    def test_method_chaining(self):
        result = (
            creation.from_collection(range(20))
            .map(lambda x: x * 2)
            .filter(lambda x: x > 10)
            .skip(3)
            .limit(5)
            .to_list()
        )

        expected = [18, 20, 22, 24, 26]
        assert result == expected, f"Expected {expected}, got {result}"

    def test_limit_larger_than_source(self):
        """Asking for more than a finite source holds yields what is there"""
        result = creation.from_values(1, 2, 3).limit(10).to_list()
        assert result == [1, 2, 3], f"Unexpected result: {result}"

    def test_skip_larger_than_source(self):
        assert creation.from_values(1, 2, 3).skip(10).to_list() == []

    def test_side_effects_only_on_consumption(self):
        side_effects = []

        def side_effect_map(x):
            side_effects.append(f"processed {x}")
            return x * 2

        stream = creation.from_values(1, 2, 3, 4, 5).map(side_effect_map)
        assert len(side_effects) == 0, "Side effects should not occur during definition"

        result = stream.limit(2).to_list()
        assert side_effects == ["processed 1", "processed 2"]
        assert result == [2, 4], f"Unexpected result: {result}"

    def test_for_each_preserves_order(self):
        seen = []
        creation.from_values("Dv", "Vn", "Vj").for_each(seen.append)
        assert seen == ["Dv", "Vn", "Vj"]


class TestTerminalOperations:
    """Test reductions and matching operations"""

    def test_reduce_with_initial(self):
        assert creation.from_values(1, 2, 3, 4).reduce(lambda a, b: a * b, 1) == 24

    def test_reduce_without_initial(self):
        assert creation.from_values(1, 2, 3, 4, 5).reduce(lambda a, b: a + b) == 15

    def test_reduce_empty(self):
        assert creation.empty().reduce(lambda a, b: a + b) is None
        assert creation.empty().reduce(lambda a, b: a + b, 0) == 0

    def test_first(self):
        assert creation.from_values("a", "b").first() == "a"
        assert creation.empty().first(default="none") == "none"

    def test_matching(self):
        assert creation.from_values(1, 2, 3).any_match(lambda x: x > 2)
        assert not creation.from_values(1, 2, 3).any_match(lambda x: x > 5)
        assert creation.from_values(1, 2, 3).all_match(lambda x: x > 0)
        assert not creation.from_values(1, 2, 3).all_match(lambda x: x > 1)
        assert creation.from_values(1, 2, 3).none_match(lambda x: x > 5)
        assert creation.empty().all_match(lambda x: False)

    def test_any_match_short_circuits(self, call_counter):
        pred = call_counter(lambda x: x == 2)
        assert creation.from_collection(range(100)).any_match(pred)
        assert pred.calls == 3

    def test_iteration_protocol(self):
        stream = creation.from_values(1, 2, 3)
        assert isinstance(stream, LazyStream)
        assert [x for x in stream] == [1, 2, 3]

    def test_predicate_error_propagates(self):
        def bad(x):
            raise TypeError("bad predicate")

        with pytest.raises(TypeError, match="bad predicate"):
            creation.from_values(1).filter(bad).to_list()
