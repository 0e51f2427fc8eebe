"""Unit tests for id generators.

Scenario: Each generator owns a private counter.
"""

from combinators.ids import get_id_generator_function


class TestIdGenerator:
    """Test scenarios for get_id_generator_function."""

    def test_given_start_when_called_then_first_id_is_start(self) -> None:
        assert get_id_generator_function(4)() == 4

    def test_given_generator_when_called_repeatedly_then_increments_by_one(
        self,
    ) -> None:
        get_id4 = get_id_generator_function(4)
        assert [get_id4(), get_id4(), get_id4()] == [4, 5, 6]

    def test_given_two_generators_when_interleaved_then_independent(
        self,
    ) -> None:
        """Given: Generators starting at 4 and 10
        When: Calling them interleaved
        Then: Each keeps its own sequence
        """
        get_id4 = get_id_generator_function(4)
        get_id10 = get_id_generator_function(10)
        assert get_id4() == 4
        assert get_id10() == 10
        assert [get_id4(), get_id4(), get_id4()] == [5, 6, 7]
        assert get_id10() == 11

    def test_given_same_start_when_two_generators_then_do_not_share_state(
        self,
    ) -> None:
        first = get_id_generator_function(0)
        first()
        first()
        second = get_id_generator_function(0)
        assert second() == 0
        assert first() == 2

    def test_given_negative_start_when_called_then_counts_up(self) -> None:
        next_id = get_id_generator_function(-2)
        assert [next_id() for _ in range(4)] == [-2, -1, 0, 1]

    def test_given_large_start_when_called_then_no_overflow(self) -> None:
        next_id = get_id_generator_function(2**63 - 1)
        next_id()
        assert next_id() == 2**63
