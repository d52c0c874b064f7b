"""Command-line entry point for decoding and generating OTPs."""

import argparse
import logging
import sys

from pydantic import ValidationError

from yubiotp import __version__
from yubiotp.core.config import Settings, setup_logging
from yubiotp.protocol import OTPError, Token, generate_otp, hex_to_modhex, parse_otp, split_otp

logger = logging.getLogger(__name__)


def _int(value: str) -> int:
    """Parse a decimal or 0x-prefixed integer argument."""
    return int(value, 0)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(prog="yubiotp", description="Decode and generate OTP tokens")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--key", help="Hex-encoded 16-byte secret key (default: $YUBIOTP_KEY)")
    parser.add_argument("--log-level", help="Log level (default: $YUBIOTP_LOG_LEVEL or INFO)")

    sub = parser.add_subparsers(dest="command", required=True)

    decode = sub.add_parser("decode", help="Decrypt and print the token inside an OTP")
    decode.add_argument("otp", help="OTP as typed by the device, with or without public id")

    generate = sub.add_parser("generate", help="Build a token and print its OTP")
    generate.add_argument("--identifier", required=True, help="Hex-encoded 6-byte private identifier")
    generate.add_argument("--counter", type=_int, required=True)
    generate.add_argument("--timestamp-low", type=_int, required=True)
    generate.add_argument("--timestamp-high", type=_int, default=0)
    generate.add_argument("--session-use", type=_int, default=0)
    generate.add_argument("--random", type=_int, default=0)

    return parser


def format_token(token: Token) -> str:
    """Format token fields, one per line."""
    return "\n".join(
        [
            f"identifier:  {token.identifier.hex()}",
            f"counter:     {token.counter_value}",
            f"capslock:    {token.capslock}",
            f"session_use: {token.session_use}",
            f"timestamp:   {token.timestamp} (0x{token.timestamp:06x})",
            f"random:      0x{token.random:04x}",
            f"crc:         0x{token.crc:04x}",
        ]
    )


def _decode(otp_text: str, key: bytes, settings: Settings) -> int:
    public_id, otp = split_otp(otp_text)
    if public_id and len(public_id) != settings.public_id_length:
        logger.warning(f"Public id is {len(public_id)} bytes, expected {settings.public_id_length}")

    token = parse_otp(otp, key)
    logger.debug(f"Decoded {token!r}")

    if public_id:
        print(f"public_id:   {hex_to_modhex(public_id.hex())} ({public_id.hex()})")
    print(format_token(token))
    return 0


def _generate(args: argparse.Namespace, key: bytes) -> int:
    token = Token.from_fields(
        identifier=bytes.fromhex(args.identifier),
        counter=args.counter,
        timestamp_low=args.timestamp_low,
        timestamp_high=args.timestamp_high,
        session_use=args.session_use,
        random=args.random,
    )
    print(generate_otp(token, key))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the command line tool. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = Settings()
    except ValidationError as e:
        parser.error(f"invalid YUBIOTP_ environment setting: {e}")

    setup_logging(args.log_level or settings.log_level)

    try:
        key = bytes.fromhex(args.key) if args.key else settings.key_bytes
    except ValueError:
        parser.error("key must be hex-encoded")

    if key is None:
        parser.error("no key given (use --key or set YUBIOTP_KEY)")

    try:
        if args.command == "decode":
            return _decode(args.otp, key, settings)
        return _generate(args, key)
    except OTPError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1
    except ValueError as e:
        # bytes.fromhex on a malformed --identifier
        logger.error(f"Invalid argument: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
