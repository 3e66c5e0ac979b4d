import argparse
import logging
import sys
from typing import Optional, Sequence

from ac_codec import AdaptiveByteCodec, CodecConfig
from utils import bits_per_byte


class InputError(Exception):
    """Raised when the harness cannot read or write one of its files."""


def read_input(path: str) -> bytes:
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as exc:
        raise InputError(f"Failed to read {path}: {exc}") from exc


def write_output(path: str, data: bytes) -> None:
    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as exc:
        raise InputError(f"Failed to write {path}: {exc}") from exc


def run_roundtrip(data: bytes, config: CodecConfig, output: Optional[str] = None) -> bool:
    encoded = AdaptiveByteCodec(config).encode(data)
    ratio = f"{bits_per_byte(len(data), len(encoded)):.4f} bits/byte" if data else "n/a"
    print(f"Original size: {len(data)} bytes, encoded size: {len(encoded)} bytes ({ratio})")
    if output is not None:
        write_output(output, encoded)

    decoded = AdaptiveByteCodec(config).decode(encoded)
    print(f"Encoded size: {len(encoded)} bytes, decoded size: {len(decoded)} bytes")

    ok = decoded == data
    print(f"roundtrip_match={ok}")
    return ok


def run_decompress(encoded: bytes, config: CodecConfig, output: Optional[str] = None) -> None:
    decoded = AdaptiveByteCodec(config).decode(encoded)
    print(f"Encoded size: {len(encoded)} bytes, decoded size: {len(decoded)} bytes")
    if output is not None:
        write_output(output, decoded)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Adaptive arithmetic coding round-trip harness")
    parser.add_argument("--input", required=True, help="file to compress (or decompress)")
    parser.add_argument("--output", help="where to write the encoded (or decoded) bytes")
    parser.add_argument("--decompress", action="store_true",
                        help="decompress input to output instead of running a round trip")
    parser.add_argument("--progress", action="store_true", help="show an encode progress bar")
    parser.add_argument("--max-decode-symbols", type=int, default=None,
                        help="abort decoding after this many symbols")
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    cfg = CodecConfig(progress=args.progress, max_decode_symbols=args.max_decode_symbols)

    try:
        data = read_input(args.input)
        if args.decompress:
            run_decompress(data, cfg, args.output)
            return 0
        ok = run_roundtrip(data, cfg, args.output)
    except InputError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except (EOFError, ValueError, RuntimeError) as exc:
        print(f"Error: could not decode {args.input}: {exc}", file=sys.stderr)
        return 1

    if not ok:
        print("Error: The original and decoded data do not match.", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
