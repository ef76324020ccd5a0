import random

import pytest

from cpkit.prefix_function import (
    PrefixAutomaton,
    compress_prefix,
    count_prefix,
    find_pos,
    prefix_function,
)


def _random_strings(count, seed=7):
    rng = random.Random(seed)
    return ["".join(rng.choice("ab") for _ in range(rng.randint(1, 14))) for _ in range(count)]


def test_known_prefix_function():
    assert prefix_function("abacaba") == [0, 0, 1, 0, 1, 2, 3]


def test_empty_prefix_function():
    assert prefix_function("") == []


@pytest.mark.parametrize("s", _random_strings(40))
def test_prefix_function_is_longest_border(s):
    pi = prefix_function(s)
    assert len(pi) == len(s)
    for i, p in enumerate(pi):
        head = s[: i + 1]
        assert p <= i
        assert head[:p] == head[len(head) - p :]
        for longer in range(p + 1, i + 1):
            assert head[:longer] != head[len(head) - longer :]


@pytest.mark.parametrize("w", _random_strings(30, seed=11))
def test_find_pos_matches_scan(w):
    pattern = "aba"
    expected = [i for i in range(len(w) - 2) if w.startswith(pattern, i)]
    assert find_pos(w, pattern) == expected
    assert find_pos(w, pattern, prefix_function(pattern)) == expected


def test_find_pos_with_lists():
    w = [1, 2, 1, 2, 1]
    assert find_pos(w, [1, 2, 1]) == [0, 2]


def test_find_pos_empty_pattern_rejected():
    with pytest.raises(ValueError):
        find_pos("abc", "")


@pytest.mark.parametrize("s", _random_strings(25, seed=3))
def test_count_prefix_counts_occurrences(s):
    counts = count_prefix(prefix_function(s))
    for i, c in enumerate(counts):
        prefix = s[: i + 1]
        occurrences = sum(1 for j in range(len(s)) if s.startswith(prefix, j))
        assert c == occurrences


def test_compress_prefix_periodic():
    assert compress_prefix(prefix_function("abcabcabc")) == 3


def test_compress_prefix_not_periodic():
    s = "abcab"
    assert compress_prefix(prefix_function(s)) == len(s)


@pytest.mark.parametrize("s", _random_strings(25, seed=5))
def test_compress_prefix_tiles(s):
    pi = prefix_function(s)
    for n in range(len(s)):
        k = compress_prefix(pi, n)
        head = s[: n + 1]
        assert (n + 1) % k == 0
        assert head[:k] * ((n + 1) // k) == head


def test_compress_prefix_out_of_range():
    with pytest.raises(IndexError):
        compress_prefix([0, 0], 2)


def _letters(c):
    return ord(c) - ord("a")


@pytest.mark.parametrize("w", _random_strings(20, seed=13))
def test_automaton_finds_matches(w):
    pattern = "abab"
    pa = PrefixAutomaton(pattern, 2, _letters)
    state = 0
    ends = []
    for i, c in enumerate(w):
        state = pa.next_state(state, c)
        if state == len(pattern):
            ends.append(i - len(pattern) + 1)
    assert ends == find_pos(w, pattern)


def test_automaton_forward_edges_and_pi():
    pattern = "aabaa"
    pa = PrefixAutomaton(pattern, 2, _letters)
    assert len(pa) == len(pattern)
    assert [pa[i] for i in range(len(pa))] == prefix_function(pattern)
    for i, c in enumerate(pattern):
        assert pa.next_state(i, c) == i + 1


def test_automaton_usable_as_pi_in_find_pos():
    pattern = "aba"
    pa = PrefixAutomaton(pattern, 2, _letters)
    assert find_pos("abababa", pattern, pa) == find_pos("abababa", pattern)


def test_automaton_default_mapping_on_ints():
    pa = PrefixAutomaton([0, 1, 0], 2)
    assert pa.next_state(3, 1) == 2
    assert pa.next_state(0, 1) == 0


def test_automaton_rejects_symbol_outside_alphabet():
    pa = PrefixAutomaton("ab", 2, _letters)
    with pytest.raises(ValueError):
        pa.next_state(0, "z")


def test_automaton_rejects_empty_pattern():
    with pytest.raises(ValueError):
        PrefixAutomaton("", 2, _letters)