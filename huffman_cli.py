#!/usr/bin/env python3
"""
Command line front end for the corpus Huffman codec.

Examples:
    huffman-codec codes --corpus corpus.txt
    huffman-codec compress --corpus corpus.txt --message "BABCBC" --output msg.huff
    huffman-codec decompress --corpus corpus.txt --input msg.huff
"""
import argparse
import logging
import sys
from typing import List, Optional

from huffman_codec import HuffmanCodec
from huffman_config import CodecConfig, ConfigLoader
from huffman_errors import HuffmanCodecError
from huffman_logging import setup_logging

logger = logging.getLogger("huffman_cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="huffman-codec",
        description="Compress and decompress short messages with a Huffman code built from a corpus.",
    )
    parser.add_argument("--config", default=None, help="YAML file with corpus_path, encoding, log_level, log_dir.")
    parser.add_argument("--log-level", default=None, help="Logging level (default: INFO).")
    parser.add_argument("--log-dir", default=None, help="Also write a timestamped log file here.")

    sub = parser.add_subparsers(dest="command", required=True)

    codes = sub.add_parser("codes", help="Print the code word of every corpus symbol.")
    codes.add_argument("--corpus", default=None, help="Corpus text file.")

    compress = sub.add_parser("compress", help="Compress a message.")
    compress.add_argument("--corpus", default=None, help="Corpus text file.")
    source = compress.add_mutually_exclusive_group(required=True)
    source.add_argument("--message", help="Message text.")
    source.add_argument("--input", help="File holding the message text.")
    compress.add_argument("--output", default=None, help="Write the payload here instead of printing hex.")

    decompress = sub.add_parser("decompress", help="Decompress a payload.")
    decompress.add_argument("--corpus", default=None, help="Corpus text file.")
    payload = decompress.add_mutually_exclusive_group(required=True)
    payload.add_argument("--hex", help="Payload as a hex string.")
    payload.add_argument("--input", help="File holding the binary payload.")

    return parser


def resolve_config(args: argparse.Namespace) -> CodecConfig:
    config = ConfigLoader.load_codec_config(args.config) if args.config else CodecConfig()
    return config.merged(
        corpus_path=args.corpus,
        log_level=args.log_level,
        log_dir=args.log_dir,
    )


def run_codes(codec: HuffmanCodec) -> int:
    table = sorted(codec.encoding_map.items(), key=lambda item: (len(item[1]), item[0]))
    for char, code in table:
        print(f"{char!r}\t{code}")
    return 0


def run_compress(codec: HuffmanCodec, args: argparse.Namespace, config: CodecConfig) -> int:
    if args.input is not None:
        with open(args.input, "r", encoding=config.encoding) as f:
            message = f.read()
    else:
        message = args.message

    payload = codec.compress(message)
    logger.info("Compressed %d symbols into %d bytes", len(message), len(payload))
    if args.output is not None:
        with open(args.output, "wb") as f:
            f.write(payload)
    else:
        print(payload.hex())
    return 0


def run_decompress(codec: HuffmanCodec, args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    if args.input is not None:
        with open(args.input, "rb") as f:
            payload = f.read()
    else:
        try:
            payload = bytes.fromhex(args.hex)
        except ValueError as e:
            parser.error(f"--hex is not valid hex: {e}")

    message = codec.decompress(payload)
    logger.info("Decompressed %d bytes into %d symbols", len(payload), len(message))
    print(message)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = resolve_config(args)
    except (OSError, ValueError) as e:
        parser.error(f"cannot load config: {e}")
    if config.corpus_path is None:
        parser.error("a corpus is required (--corpus or corpus_path in --config)")

    try:
        setup_logging("huffman_cli", log_dir=config.log_dir, level=config.log_level)
    except ValueError as e:
        parser.error(str(e))

    try:
        codec = HuffmanCodec.from_file(config.get_corpus_path(), encoding=config.encoding)
        if args.command == "codes":
            return run_codes(codec)
        if args.command == "compress":
            return run_compress(codec, args, config)
        return run_decompress(codec, args, parser)
    except HuffmanCodecError as e:
        logger.error("%s: %s", type(e).__name__, e)
        return 2
    except OSError as e:
        logger.error("I/O error: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
