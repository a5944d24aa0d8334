import argparse
import sys

from rational256.constants import WORD_BYTES
from rational256.errors import RationalException
from rational256.types.rational import Rational, div, from_integer, to_integer


def parse_fraction(s: str) -> Rational:
    """Parses "N" or "N/D" into a reduced Rational.

    Args:
        s: The fraction text, both parts unsigned decimal integers.
    Returns:
        The reduced value.
    """
    num, sep, den = s.partition("/")
    try:
        x = from_integer(int(num))
        if sep:
            x = div(x, from_integer(int(den)))
    except ValueError:
        raise ValueError(f"Not a fraction: {s!r}") from None
    return x


def encode(s: str) -> str:
    x = parse_fraction(s)
    return "\n".join(
        [
            f"{x}",
            f"{x.to_word()}",
            Rational.to_bytes(x).hex(),
        ]
    )


def decode(raw_hex: str) -> str:
    raw = bytes.fromhex(raw_hex)
    if len(raw) != WORD_BYTES:
        raise ValueError(f"Expected {WORD_BYTES} bytes, got {len(raw)}")
    x = Rational.from_bytes(raw)
    return "\n".join([f"{x}", f"{to_integer(x)}"])


def main(argv=None):
    ap = argparse.ArgumentParser(
        description="Encode and decode packed 256-bit rational words"
    )
    subparsers = ap.add_subparsers(dest="cmd", required=True)
    enc = subparsers.add_parser("encode", help="N or N/D to packed word")
    enc.add_argument("fraction")
    dec = subparsers.add_parser("decode", help="32-byte little-endian hex to N/D")
    dec.add_argument("hex")
    args = ap.parse_args(argv)

    try:
        if args.cmd == "encode":
            print(encode(args.fraction))
        else:
            print(decode(args.hex))
    except (RationalException, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
