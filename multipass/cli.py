from __future__ import annotations

import argparse
import json
import sys

from .codec import Multipass
from .constants import APP_VERSION, LOGGER
from .env import load_env, setup_logging, validate_env
from .errors import ConfigurationError, MultipassError

CUSTOMER_OPTIONS = (
    "created_at",
    "first_name",
    "last_name",
    "tag_string",
    "identifier",
    "remote_ip",
    "return_to",
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="multipass",
        description="Issue and inspect multipass login tokens.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    commands = parser.add_subparsers(dest="command", required=True)

    login = commands.add_parser("login-url", help="print a login URL for a customer")
    login.add_argument("--email", required=True)
    for name in CUSTOMER_OPTIONS:
        login.add_argument(f"--{name.replace('_', '-')}", dest=name)

    decode = commands.add_parser("decode", help="verify a token and print its attributes")
    decode.add_argument("token")
    return parser


def create_multipass() -> Multipass:
    load_env()
    setup_logging()
    validate_env()
    return Multipass.from_env()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        multipass = create_multipass()
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    try:
        if args.command == "decode":
            print(json.dumps(multipass.decode_token(args.token), indent=2, ensure_ascii=False))
            return 0

        customer = {"email": args.email}
        for name in CUSTOMER_OPTIONS:
            value = getattr(args, name)
            if value is not None:
                customer[name] = value
        print(multipass.generate_login_url(customer))
    except MultipassError as exc:
        LOGGER.info("multipass %s failed", args.command)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
