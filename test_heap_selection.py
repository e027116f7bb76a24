import random

import pytest

from utils.heap_selection import find_nth_minimum


class TestFindNthMinimum:
    """
    Tests for the heap-based n-th minimum selection.
    """

    @pytest.mark.parametrize(
        "numbers, n, expected",
        [
            ([5, 3, 8, 1, 9, 2], 3, 3),
            ([5, 3, 8, 1, 9, 2], 1, 1),
            ([5, 3, 8, 1, 9, 2], 6, 9),
            ([42], 1, 42),
            ([1, 1, 2], 2, 1),
            ([7, 7, 7, 7], 3, 7),
            ([-5, 0, -10, 3], 2, -5),
            ([10, 20, 30, 40, 50], 4, 40),
        ],
        ids=["third-min", "first-min", "last-is-max", "single", "duplicates",
             "all-equal", "negatives", "sorted-input"]
    )
    def test_returns_expected_rank(self, numbers, n, expected):
        """
        Test that find_nth_minimum picks the value at the requested rank.

        Args:
            numbers: Input integers
            n: Requested rank
            expected: Expected n-th minimum
        """
        assert find_nth_minimum(numbers, n) == expected

    def test_matches_sorted_selection_on_random_data(self):
        """
        Test that the heap selection agrees with sorting for random inputs and ranks.
        """
        rng = random.Random(1234)
        for _ in range(50):
            numbers = [rng.randint(-1000, 1000) for _ in range(rng.randint(1, 200))]
            n = rng.randint(1, len(numbers))
            assert find_nth_minimum(numbers, n) == sorted(numbers)[n - 1]

    def test_does_not_modify_input(self):
        """
        Test that the input collection is left untouched.
        """
        numbers = [4, 2, 9, 1]
        find_nth_minimum(numbers, 2)
        assert numbers == [4, 2, 9, 1]

    def test_accepts_tuples(self):
        """
        Test that any sequence, not only lists, is accepted.
        """
        assert find_nth_minimum((3, 1, 2), 2) == 2

    @pytest.mark.parametrize("numbers", [None, []], ids=["none", "empty"])
    def test_empty_collection_raises(self, numbers):
        """
        Test that a missing or empty collection is rejected.

        Args:
            numbers: None or an empty list
        """
        with pytest.raises(ValueError, match="Numbers collection cannot be null or empty"):
            find_nth_minimum(numbers, 1)

    @pytest.mark.parametrize("n", [0, -1, 4], ids=["zero", "negative", "too-large"])
    def test_rank_out_of_range_raises(self, n):
        """
        Test that ranks outside [1, len(numbers)] are rejected with the valid range.

        Args:
            n: Out-of-range rank
        """
        with pytest.raises(ValueError, match="N must be between 1 and 3"):
            find_nth_minimum([1, 2, 3], n)
