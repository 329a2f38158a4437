# filename: huffman_core.py

import heapq
import logging
from collections import Counter

from huffman_errors import InvalidTrieError

logger = logging.getLogger(__name__)


class HuffmanNode:
    def __init__(self, char, freq, left=None, right=None):
        self.char = char
        self.freq = freq
        self.left = left
        self.right = right

    def is_leaf(self):
        return self.char is not None

    def __repr__(self):
        if self.is_leaf():
            return f"HuffmanNode({self.char!r}, {self.freq})"
        return f"HuffmanNode(<internal>, {self.freq})"


class HuffmanLogic:
    def count_frequencies(self, corpus):
        # Frequency analysis of the corpus characters
        return Counter(corpus)

    def build_tree(self, freqs):
        """Merge the two lightest nodes until a single root remains.

        Heap entries are ``(weight, sequence, node)``. Leaves are numbered in
        ascending symbol order and each merged node takes the next number, so
        equal weights leave the heap in insertion order.
        """
        if not freqs:
            # Placeholder root, only usable with empty messages
            return HuffmanNode(None, 0)

        priority_queue = [
            (freq, seq, HuffmanNode(char, freq))
            for seq, (char, freq) in enumerate(sorted(freqs.items()))
        ]
        heapq.heapify(priority_queue)

        if len(priority_queue) == 1:
            # A lone leaf gets the code "0" under a synthetic root
            _, _, leaf = priority_queue[0]
            return HuffmanNode(None, leaf.freq, left=leaf)

        seq = len(priority_queue)
        while len(priority_queue) > 1:
            left_freq, _, left = heapq.heappop(priority_queue)
            right_freq, _, right = heapq.heappop(priority_queue)
            merged = HuffmanNode(None, left_freq + right_freq, left=left, right=right)
            heapq.heappush(priority_queue, (merged.freq, seq, merged))
            seq += 1

        root = priority_queue[0][2]
        logger.debug("Merged %d leaves into a trie of weight %d", len(freqs), root.freq)
        return root

    def generate_codes(self, node):
        if node is None:
            return {}
        if node.is_leaf():
            raise InvalidTrieError(
                f"root leaf {node.char!r} would get an empty code word"
            )

        codes = {}
        stack = [(node, "")]
        while stack:
            current, current_code = stack.pop()
            if current.is_leaf():
                codes[current.char] = current_code
                continue
            if current.right is not None:
                stack.append((current.right, current_code + "1"))
            if current.left is not None:
                stack.append((current.left, current_code + "0"))
        return codes
