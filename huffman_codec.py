# filename: huffman_codec.py

import logging
from types import MappingProxyType

from huffman_core import HuffmanLogic
from huffman_errors import (
    CorruptPayloadError,
    EmptyAlphabetError,
    EmptyPayloadError,
    InvalidHeaderError,
    MessageTooLargeError,
    TruncatedPayloadError,
    UnknownSymbolError,
)

logger = logging.getLogger(__name__)

# The header is a single signed byte
PAYLOAD_MAX_SYMBOLS = 127


class HuffmanCodec:
    """Huffman code built once from a corpus and reused for many messages.

    The trie and encoding map are fixed at construction and never mutated, so
    one instance can serve concurrent ``compress``/``decompress`` calls.

    Payload layout: one header byte with the symbol count, then the code
    words packed most-significant bit first, zero-padded to a byte boundary.
    """

    def __init__(self, corpus):
        self.logic = HuffmanLogic()
        freqs = self.logic.count_frequencies(corpus)
        self._root = self.logic.build_tree(freqs)
        self._codes = MappingProxyType(self.logic.generate_codes(self._root))

        logger.debug("Built Huffman trie: %d symbols from %d corpus characters",
                     len(self._codes), len(corpus))
        for char, code in self._codes.items():
            logger.debug("  %r -> %s", char, code)

    @classmethod
    def from_file(cls, path, encoding="utf-8"):
        with open(path, "r", encoding=encoding) as f:
            corpus = f.read()
        logger.info("Loaded corpus from %s (%d characters)", path, len(corpus))
        return cls(corpus)

    @property
    def encoding_map(self):
        return self._codes

    @property
    def trie(self):
        return self._root

    def compress(self, message):
        if len(message) > PAYLOAD_MAX_SYMBOLS:
            raise MessageTooLargeError(len(message), PAYLOAD_MAX_SYMBOLS)

        codes = self._codes
        parts = []
        for position, char in enumerate(message):
            code = codes.get(char)
            if code is None:
                raise UnknownSymbolError(char, position)
            parts.append(code)
        encoded_str = "".join(parts)

        # 0-7 zero bits to reach a byte boundary
        padding = -len(encoded_str) % 8
        encoded_str += "0" * padding

        b = bytearray([len(message)])
        for i in range(0, len(encoded_str), 8):
            byte = encoded_str[i:i + 8]
            b.append(int(byte, 2))
        return bytes(b)

    def decompress(self, payload):
        if not payload:
            raise EmptyPayloadError("payload has no header byte")

        count = payload[0]
        if count > PAYLOAD_MAX_SYMBOLS:
            raise InvalidHeaderError(
                f"header announces {count} symbols, at most {PAYLOAD_MAX_SYMBOLS} are allowed"
            )
        if count == 0:
            return ""

        root = self._root
        if root.left is None and root.right is None:
            raise EmptyAlphabetError(
                f"cannot decode {count} symbols with a codec built from an empty corpus"
            )

        bits = "".join(format(byte, "08b") for byte in payload[1:])
        symbols = []
        node = root
        for bit in bits:
            node = node.left if bit == "0" else node.right
            if node is None:
                raise CorruptPayloadError(
                    f"bit path leaves the trie after {len(symbols)} symbols"
                )
            if node.is_leaf():
                symbols.append(node.char)
                if len(symbols) == count:
                    # Remaining bits are padding
                    break
                node = root

        if len(symbols) < count:
            raise TruncatedPayloadError(
                f"decoded {len(symbols)} of {count} symbols before the payload ran out"
            )
        return "".join(symbols)
