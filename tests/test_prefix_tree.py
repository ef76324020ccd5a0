import random

import pytest

from cpkit.prefix_tree import PrefixTree

WORDS = ["abc", "ab", "b", "abc", "ca"]


def naive_count(words, s, full):
    return sum(1 for w in words if s.startswith(w) and (full or w != s))


def filled():
    tree = PrefixTree("abc")
    nodes = [tree.insert(w) for w in WORDS]
    return tree, nodes


def test_find_returns_inserted_node():
    tree, nodes = filled()
    for w, node in zip(WORDS, nodes):
        assert tree.find(w) == node
    assert tree.find("aa") == -1
    assert tree.find("") == tree.ROOT


def test_counters_track_words():
    tree, _ = filled()
    assert tree.nodes[tree.ROOT].num_starts == len(WORDS)
    assert tree.nodes[tree.find("abc")].num_ends == WORDS.count("abc")
    assert tree.nodes[tree.find("a")].num_starts == sum(w.startswith("a") for w in WORDS)
    assert tree.nodes[tree.find("a")].num_ends == 0


def test_count_prefix_full_and_partial():
    tree, _ = filled()
    for s in ["abc", "abcc", "ab", "a", "bca", "c", "ca", ""]:
        assert tree.count_prefix(s) == naive_count(WORDS, s, True)
        assert tree.count_prefix(s, False) == naive_count(WORDS, s, False)


def test_erase_undoes_insert():
    tree, _ = filled()
    node = tree.erase("ab")
    assert tree.find("ab") == node
    assert tree.nodes[node].num_ends == 0
    remaining = [w for w in WORDS if w != "ab"]
    assert tree.nodes[tree.ROOT].num_starts == len(remaining)
    assert tree.count_prefix("abc") == naive_count(remaining, "abc", True)


def test_next_creates_once():
    tree = PrefixTree(3)
    before = len(tree)
    child = tree.next(tree.ROOT, 2)
    assert len(tree) == before + 1
    assert tree.next(tree.ROOT, 2) == child
    assert tree.nodes[tree.ROOT].children[2] == child


def test_integer_alphabet_random_words():
    rng = random.Random(3)
    words = [tuple(rng.randrange(3) for _ in range(rng.randrange(5))) for _ in range(30)]
    tree = PrefixTree(3)
    for w in words:
        tree.insert(w)
    for w in words:
        assert tree.nodes[tree.find(w)].num_ends == words.count(w)
        expected = sum(1 for x in words if w[: len(x)] == x)
        assert tree.count_prefix(w) == expected


@pytest.mark.parametrize("bad", ["x", "ad"])
def test_unknown_symbol_rejected(bad):
    tree = PrefixTree("abc")
    with pytest.raises(IndexError):
        tree.insert(bad)


def test_integer_symbol_out_of_range():
    tree = PrefixTree(2)
    with pytest.raises(IndexError):
        tree.find([2])
    with pytest.raises(IndexError):
        tree.count_prefix([-1])


def test_negative_alphabet_rejected():
    with pytest.raises(ValueError):
        PrefixTree(-1)