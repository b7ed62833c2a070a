"""
CLI entry point for the jwt-codec tool.

Subcommands:
    encode          claims JSON -> compact token
    decode          compact token -> header, payload and signature
    classify        report the kind of one or more claim names
    collision-name  generate a collision-resistant claim name

Token and claims input can be passed as an argument, piped via ``--stdin``
or typed at an interactive prompt.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from .claims import ClaimSet
from .config import DEFAULT_CONFIG_PATH, AppConfig, ConfigError, load_config, merge_cli_overrides
from .errors import JWTError
from .logging_setup import setup_logging
from .names import classify, generate_collision_name, parse_name
from .token import Token

__all__ = ["main"]

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Input / output helpers
# ---------------------------------------------------------------------------

def _read_input(args: argparse.Namespace, prompt: str) -> str:
    """Resolve the text to process from stdin, the argument, or a prompt."""
    if args.stdin:
        text = sys.stdin.read().strip()
        if not text:
            print("Error: No input received on stdin.")
            sys.exit(1)
        return text
    if args.value:
        return args.value
    try:
        return input(prompt).strip()
    except (EOFError, KeyboardInterrupt):
        print()
        sys.exit(130)


def _print_json(label: str, data: object, indent: int) -> None:
    """Print a labelled JSON section."""
    print(f"\n{label}:")
    print(json.dumps(data, indent=indent, ensure_ascii=False))


def _print_token(token: Token, indent: int) -> None:
    """Pretty-print the decoded token parts."""
    _print_json("Header", {"alg": token.header.alg.value}, indent)
    _print_json("Payload", token.claims.to_dict(), indent)

    print("\nClaims:")
    if not len(token.claims):
        print("  (none)")
    width = max((len(name) for name in token.claims.names()), default=0)
    for claim in token.claims:
        print(f"  {claim.name_text:<{width}}  {claim.kind.value}")

    print(f"\nSignature:\n{token.signature or '(empty)'}")


# ---------------------------------------------------------------------------
# Subcommands
# ---------------------------------------------------------------------------

def _cmd_encode(args: argparse.Namespace, cfg: AppConfig) -> None:
    text = _read_input(args, "Please enter the claims JSON: ")
    token = Token(claims=ClaimSet.decode_from_text(text))
    logger.debug("Encoding %d claim(s) in %s mode", len(token.claims), cfg.output.mode)
    if cfg.output.mode == "plain":
        print(token.encode_to_text(), end="")
    else:
        print(token.encode_to_base64(), end="")


def _cmd_decode(args: argparse.Namespace, cfg: AppConfig) -> None:
    text = _read_input(args, "Please enter your JWT token: ")
    logger.debug("Decoding %d character(s) in %s mode", len(text), cfg.output.mode)
    if cfg.output.mode == "plain":
        token = Token.decode_from_text(text)
    else:
        token = Token.decode_from_base64(text)
    _print_token(token, cfg.output.indent)


def _cmd_classify(args: argparse.Namespace, cfg: AppConfig) -> None:
    for name_text in args.names:
        name = parse_name(name_text)
        print(f"{name.text}\t{classify(name).value}")


def _cmd_collision_name(args: argparse.Namespace, cfg: AppConfig) -> None:
    print(generate_collision_name(args.fragment))


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", "-c", default=None,
                        help=f"Path to YAML config file (default: {DEFAULT_CONFIG_PATH})")
    common.add_argument("--verbose", "-v", action="store_true", default=False,
                        help="Enable verbose (debug) logging")
    common.add_argument("--log-file", default=None,
                        help="Also write debug logs to this file")

    mode = argparse.ArgumentParser(add_help=False)
    group = mode.add_mutually_exclusive_group()
    group.add_argument("--plain", dest="mode", action="store_const", const="plain",
                       help="Use the plaintext compact form")
    group.add_argument("--base64", dest="mode", action="store_const", const="base64",
                       help="Use the base64 compact form (default)")
    mode.add_argument("--stdin", action="store_true", default=False,
                      help="Read input from stdin (for piping)")

    parser = argparse.ArgumentParser(
        prog="jwt-codec",
        description="Encode and decode unsecured JWT compact serializations.",
        epilog="Examples:\n"
               "  %(prog)s encode '{\"sub\": \"alice\"}'\n"
               "  %(prog)s decode --stdin < token.txt\n"
               "  %(prog)s classify iss https://example.com/role my_claim\n"
               "  %(prog)s collision-name role\n",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    enc = sub.add_parser("encode", parents=[common, mode], help="Encode claims JSON into a token")
    enc.add_argument("value", nargs="?", default=None,
                     help="Claims JSON object (optional, prompts interactively if omitted)")
    enc.set_defaults(func=_cmd_encode)

    dec = sub.add_parser("decode", parents=[common, mode], help="Decode and inspect a token")
    dec.add_argument("value", nargs="?", default=None,
                     help="Token string (optional, prompts interactively if omitted)")
    dec.set_defaults(func=_cmd_decode)

    cls = sub.add_parser("classify", parents=[common], help="Classify claim names")
    cls.add_argument("names", nargs="+", metavar="NAME", help="Claim name(s)")
    cls.set_defaults(func=_cmd_classify)

    col = sub.add_parser("collision-name", parents=[common],
                         help="Generate a collision-resistant claim name")
    col.add_argument("fragment", help="Readable suffix for the generated name")
    col.set_defaults(func=_cmd_collision_name)

    return parser.parse_args(argv)


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)

    try:
        cfg = merge_cli_overrides(load_config(args.config), args)
    except ConfigError as exc:
        print(f"Error: {exc}")
        sys.exit(1)

    log_path = setup_logging(verbose=cfg.log.verbose, log_file=cfg.log.log_file)
    if log_path:
        logger.debug("Logging to %s", log_path)

    try:
        args.func(args, cfg)
    except JWTError as exc:
        logger.debug("%s failed: %s", args.command, type(exc).__name__)
        print(f"Error: {exc}")
        sys.exit(1)
