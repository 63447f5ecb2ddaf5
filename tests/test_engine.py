"""
Testing pure game logic.
"""

import pytest

from mastermind.engine import count_digits, is_win, score_guess


def score(secret, guess):
    return score_guess(secret, count_digits(secret), guess)


def test_count_digits_only_counts_present_values():
    counts = count_digits([3, 1, 3, 6])
    assert dict(counts) == {3: 2, 1: 1, 6: 1}
    assert counts[5] == 0


def test_score_guess_no_matches():
    exact, partial = score([1, 2, 3, 4], [5, 5, 6, 6])
    assert exact == 0
    assert partial == 0


def test_score_guess_swapped_digits():
    # Two in place, the last two swapped
    exact, partial = score([1, 2, 3, 4], [1, 2, 4, 3])
    assert exact == 2
    assert partial == 2


def test_score_guess_with_duplicates():
    # Positions 0 and 3 are exact; each remaining 1 and 2 is used once
    exact, partial = score([1, 1, 2, 2], [1, 2, 1, 2])
    assert exact == 2
    assert partial == 2


def test_exact_match_is_not_counted_again_as_partial():
    # The only 1 in the secret is already taken by the exact match at index 0
    exact, partial = score([1, 2, 3, 4], [1, 1, 1, 1])
    assert exact == 1
    assert partial == 0


def test_duplicate_guess_digits_capped_by_remaining_copies():
    # Secret has one 5, guess offers it three times in wrong places
    exact, partial = score([5, 1, 1, 1], [2, 5, 5, 5])
    assert exact == 0
    assert partial == 1


@pytest.mark.parametrize("secret,guess,expected", [
    ([1, 2, 3, 4], [1, 2, 3, 4], (4, 0)),
    ([6, 6, 6, 6], [6, 6, 6, 6], (4, 0)),
    ([1, 2, 3, 4], [4, 3, 2, 1], (0, 4)),
    ([1, 1, 2, 2], [2, 2, 1, 1], (0, 4)),
    ([1, 1, 1, 2], [1, 2, 2, 2], (2, 0)),
    ([3], [3], (1, 0)),
    ([3], [2], (0, 0)),
])
def test_score_guess_golden(secret, guess, expected):
    assert score(secret, guess) == expected


def test_score_guess_length_mismatch():
    with pytest.raises(ValueError):
        score([1, 2, 3, 4], [1, 2, 3])


def test_is_win_true_and_false():
    assert is_win(4, 4) is True
    assert is_win(3, 4) is False


def test_score_guess_with_huge_digit_values():
    # Tables hold only the values that occur, whatever the digit range
    secret = [10**11, 7, 10**11]
    exact, partial = score_guess(secret, count_digits(secret), [7, 10**11, 10**11])
    assert exact == 1
    assert partial == 2
