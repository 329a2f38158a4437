import pytest

from huffman_core import HuffmanLogic, HuffmanNode
from huffman_errors import InvalidTrieError


@pytest.fixture
def logic():
    return HuffmanLogic()


def _leaves(root):
    stack, out = [root], []
    while stack:
        node = stack.pop()
        if node.is_leaf():
            out.append(node)
        for child in (node.left, node.right):
            if child is not None:
                stack.append(child)
    return out


def test_count_frequencies_exact(logic):
    freqs = logic.count_frequencies("ABBBCC")
    assert dict(freqs) == {"A": 1, "B": 3, "C": 2}


def test_count_frequencies_empty(logic):
    assert len(logic.count_frequencies("")) == 0


def test_build_tree_empty_table_is_placeholder(logic):
    root = logic.build_tree(logic.count_frequencies(""))
    assert root.char is None
    assert root.freq == 0
    assert root.left is None and root.right is None


def test_build_tree_single_symbol_wrapped_left(logic):
    root = logic.build_tree(logic.count_frequencies("zzzz"))
    assert not root.is_leaf()
    assert root.freq == 4
    assert root.left.char == "z"
    assert root.right is None


def test_root_weight_is_corpus_length(logic):
    corpus = "the quick brown fox jumps over the lazy dog"
    root = logic.build_tree(logic.count_frequencies(corpus))
    assert root.freq == len(corpus)
    assert sorted(leaf.char for leaf in _leaves(root)) == sorted(set(corpus))


def test_internal_weight_is_sum_of_children(logic):
    root = logic.build_tree(logic.count_frequencies("abracadabra alakazam"))
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_leaf():
            continue
        assert node.freq == node.left.freq + node.right.freq
        stack.extend([node.left, node.right])


def test_codes_two_symbols(logic):
    root = logic.build_tree(logic.count_frequencies("AB"))
    assert logic.generate_codes(root) == {"A": "0", "B": "1"}


def test_codes_independent_of_corpus_order(logic):
    a = logic.generate_codes(logic.build_tree(logic.count_frequencies("AB")))
    b = logic.generate_codes(logic.build_tree(logic.count_frequencies("BA")))
    assert a == b


def test_codes_leaf_wins_weight_tie_against_merged_node(logic):
    root = logic.build_tree(logic.count_frequencies("ABBBCC"))
    assert logic.generate_codes(root) == {"B": "0", "A": "10", "C": "11"}


def test_codes_three_way_tie_uses_insertion_order(logic):
    root = logic.build_tree(logic.count_frequencies("BBBBBBBAAAAAAACCCCCCC"))
    assert logic.generate_codes(root) == {"C": "0", "A": "10", "B": "11"}


def test_codes_single_symbol_is_one_bit(logic):
    root = logic.build_tree(logic.count_frequencies("A" * 17))
    assert logic.generate_codes(root) == {"A": "0"}


def test_codes_empty_trie(logic):
    assert logic.generate_codes(logic.build_tree({})) == {}
    assert logic.generate_codes(None) == {}


def test_codes_bare_leaf_root_rejected(logic):
    with pytest.raises(InvalidTrieError):
        logic.generate_codes(HuffmanNode("A", 3))


def test_codes_prefix_free(logic):
    corpus = "It was the best of times, it was the worst of times; 0123456789!?"
    codes = logic.generate_codes(logic.build_tree(logic.count_frequencies(corpus)))
    assert set(codes) == set(corpus)
    for a, code_a in codes.items():
        for b, code_b in codes.items():
            if a != b:
                assert not code_b.startswith(code_a)


def test_more_frequent_symbols_never_get_longer_codes(logic):
    freqs = logic.count_frequencies("e" * 40 + "t" * 20 + "a" * 10 + "o" * 5 + "q")
    codes = logic.generate_codes(logic.build_tree(freqs))
    by_freq = sorted(freqs, key=lambda c: -freqs[c])
    lengths = [len(codes[c]) for c in by_freq]
    assert lengths == sorted(lengths)


def test_codes_on_deep_skewed_trie(logic):
    # Doubling weights give a chain deeper than the default recursion limit
    freqs = {chr(0x100 + i): 2 ** i for i in range(1500)}
    codes = logic.generate_codes(logic.build_tree(freqs))
    assert len(codes) == 1500
    assert max(len(code) for code in codes.values()) == 1499
    assert len(codes[chr(0x100 + 1499)]) == 1
