#!/usr/bin/env python3
"""Log in, log out, register and inspect the current hodlit account."""

from __future__ import annotations

import argparse
import getpass
import logging
import sys
from typing import Sequence

import requests

from hodlit.client import HodlClient
from hodlit.config import AppSettings
from hodlit.errors import ApiError
from hodlit.validation import (
    validate_email_field,
    validate_login_form,
    validate_registration_form,
)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)

    login = commands.add_parser("login", help="Authenticate and store the session locally.")
    login.add_argument("email")
    login.add_argument("--password", help="Password (prompted when omitted).")

    commands.add_parser("logout", help="End the session and clear local credentials.")
    commands.add_parser("whoami", help="Show the current user's profile.")
    commands.add_parser("status", help="Report whether a valid local session exists.")

    register = commands.add_parser("register", help="Create an account.")
    register.add_argument("email")
    register.add_argument("--code", required=True, help="6-digit email verification code.")
    register.add_argument("--invite-code", default="", help="Invitation code, if any.")
    register.add_argument("--password", help="Password (prompted when omitted).")

    send_code = commands.add_parser("send-code", help="Email a verification code.")
    send_code.add_argument("email")

    return parser.parse_args(argv)


def _password(args: argparse.Namespace, *, confirm: bool = False) -> tuple[str, str]:
    if args.password is not None:
        return args.password, args.password
    password = getpass.getpass("Password: ")
    repeated = getpass.getpass("Repeat password: ") if confirm else password
    return password, repeated


def run(args: argparse.Namespace, client: HodlClient) -> None:
    if args.command == "login":
        password, _ = _password(args)
        email = validate_login_form(args.email, password)
        result = client.auth.login(email, password)
        print(f"Logged in as {email} (user {result.user_id}).")
    elif args.command == "logout":
        try:
            client.auth.logout()
        except ApiError as exc:
            print(f"Remote logout failed ({exc.message}); local session cleared.")
        else:
            print("Logged out.")
    elif args.command == "whoami":
        details = client.auth.fetch_current_user()
        print(details.email)
        for key, value in (details.model_extra or {}).items():
            print(f"  {key}: {value}")
    elif args.command == "status":
        session = client.store.load() if client.store.is_valid() else None
        if session is None:
            print("Not logged in.")
        else:
            print(f"Logged in as {session.email or session.user_id}.")
    elif args.command == "register":
        password, repeated = _password(args, confirm=True)
        email = validate_registration_form(args.email, password, repeated, args.code)
        client.auth.register(email, password, args.code, args.invite_code)
        print("Registration complete; you can now log in.")
    elif args.command == "send-code":
        email = validate_email_field(args.email)
        client.auth.request_verification_code(email)
        print(f"Verification code sent to {email}.")


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    settings = AppSettings()
    logging.basicConfig(level=settings.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    with HodlClient.from_settings(settings) as client:
        try:
            run(args, client)
        except ApiError as exc:
            print(f"{exc.kind.value}: {exc.message}", file=sys.stderr)
            return 1
        except requests.RequestException as exc:
            print(f"network error: {exc}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
