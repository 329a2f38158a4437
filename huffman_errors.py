# filename: huffman_errors.py


class HuffmanCodecError(ValueError):
    """Base class for every error raised by the codec."""


class UnknownSymbolError(HuffmanCodecError):
    def __init__(self, symbol, position):
        super().__init__(f"symbol {symbol!r} at position {position} is not in the encoding map")
        self.symbol = symbol
        self.position = position


class MessageTooLargeError(HuffmanCodecError):
    def __init__(self, length, limit):
        super().__init__(f"message has {length} symbols, the header holds at most {limit}")
        self.length = length
        self.limit = limit


class EmptyAlphabetError(HuffmanCodecError):
    pass


class InvalidTrieError(HuffmanCodecError):
    pass


class PayloadError(HuffmanCodecError):
    """The compressed bytes do not decode against this codec."""


class EmptyPayloadError(PayloadError):
    pass


class InvalidHeaderError(PayloadError):
    pass


class TruncatedPayloadError(PayloadError):
    pass


class CorruptPayloadError(PayloadError):
    pass
