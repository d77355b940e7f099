import pytest

from edjudge.set_problems import card_game, largest_k, lower_bounds, solve


def test_lower_bounds():
    assert lower_bounds([1, 5, 9], [5, 6, 10]) == [5, 9, None]


def test_card_game_pairs_cancel():
    assert card_game(2, [1, 2, 1, 3]) == [[], [2, 3]]


def test_card_game_invariants():
    cards = [4, 8, 4, 2, 8, 8, 6, 2, 4]
    hands = card_game(3, cards)
    assert len(hands) == 3
    for hand in hands:
        assert hand == sorted(set(hand))
        assert set(hand) <= set(cards)


def test_card_game_needs_players():
    with pytest.raises(ValueError):
        card_game(0, [1])


def test_largest_k_numbers():
    assert largest_k([5, 1, 9, 3, -1, 100], 2, -1) == [5, 9]


def test_largest_k_without_sentinel_reads_everything():
    values = [3, 8, 1, 8, 6, 2]
    result = largest_k(values, 3)
    assert result == sorted(set(values))[-3:]


def test_largest_k_rejects_zero():
    with pytest.raises(ValueError):
        largest_k([1, 2], 0)


def test_solve_lower_bound():
    text = "3\n1 5 9\n3\n5 6 10\n0\n"
    assert solve(43, text) == "5\n9\nNO HAY\n---\n"


def test_solve_card_game():
    assert solve(44, "2 4\n1 2 1 3\n") == "J1: {}\nJ2: {2, 3}\n---\n"


def test_solve_largest():
    text = "N 2\n5 1 9 3 -1\nP 1\nhola adios FIN\n"
    assert solve(46, text) == "5 9\nhola\n"


def test_solve_unknown_exercise():
    with pytest.raises(ValueError):
        solve(45, "")