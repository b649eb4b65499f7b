"""PassMeter command-line interface.

Usage examples:
    python -m passmeter check mypassword
    python -m passmeter check -f passwords.txt --json
    python -m passmeter -v check -b https://example.com/common.txt hunter2
    python -m passmeter interactive --show
"""

import argparse
import getpass
import json
import logging
import sys
from concurrent.futures import ThreadPoolExecutor

from passmeter import DEGRADED_MESSAGE, EMPTY_MESSAGE, evaluate, load_blacklist
from passmeter.config import configure_logging

log = logging.getLogger(__name__)

BAR_CELLS = 5


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="passmeter",
        description="Live password strength feedback with a common-password blacklist.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command")

    # ── check ──────────────────────────────────────────────────────────
    check_p = sub.add_parser("check", help="Evaluate one or more passwords")
    check_p.add_argument("passwords", nargs="*", help="Passwords to evaluate")
    check_p.add_argument(
        "-f", "--file",
        help="Read passwords from a file (one per line)",
    )
    check_p.add_argument(
        "-b", "--blacklist",
        help="Common-password list: URL or file path (default: bundled list)",
    )
    check_p.add_argument(
        "--json", action="store_true",
        help="Print results as JSON",
    )

    # ── interactive ────────────────────────────────────────────────────
    inter_p = sub.add_parser(
        "interactive", help="Evaluate passwords typed at a prompt",
    )
    inter_p.add_argument(
        "-s", "--show", action="store_true",
        help="Show typed passwords (toggle with :show / :hide)",
    )
    inter_p.add_argument(
        "-b", "--blacklist",
        help="Common-password list: URL or file path (default: bundled list)",
    )

    args = parser.parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else None)

    if args.command == "check":
        return _cmd_check(args)
    if args.command == "interactive":
        return _cmd_interactive(args)

    parser.print_help()
    return 0


def format_report(report: dict) -> list[str]:
    """Render an evaluation as text lines: status, strength bar, checklist."""
    filled = report["score"] if report["password_length"] else 0
    bar = "#" * filled + "-" * (BAR_CELLS - filled)
    lines = [f"[{bar}] {report['message']}"]
    for name, ok in report["criteria"].items():
        mark = "✓" if ok else "✗"
        lines.append(f"    {mark} {name}")
    return lines


def _cmd_check(args: argparse.Namespace) -> int:
    passwords = list(args.passwords)

    if args.file:
        try:
            with open(args.file, encoding="utf-8") as f:
                passwords.extend(line.rstrip("\r\n") for line in f if line.strip())
        except (OSError, UnicodeDecodeError) as exc:
            print(f"Error: cannot read {args.file}: {exc}", file=sys.stderr)
            return 1

    if not passwords:
        print("Error: provide passwords as arguments or via --file", file=sys.stderr)
        return 1

    loaded = load_blacklist(args.blacklist)
    if loaded["degraded"]:
        print(f"Warning: {DEGRADED_MESSAGE}", file=sys.stderr)

    reports = [evaluate(pwd, loaded["passwords"]) for pwd in passwords]

    if args.json:
        print(json.dumps(reports, ensure_ascii=False, indent=2))
    else:
        for pwd, report in zip(passwords, reports):
            print(f"  '{pwd}'")
            for line in format_report(report):
                print(f"    {line}")

    return 1 if any(r["blacklisted"] for r in reports) else 0


def _cmd_interactive(args: argparse.Namespace) -> int:
    show = args.show
    print("PassMeter interactive mode. Type ':quit' or ':exit' to leave.")
    print("  Type ':show' to enable visible typing; ':hide' to hide input.")

    # Load in the background; evaluate against an empty set until it is ready.
    pool = ThreadPoolExecutor(max_workers=1)
    pending = pool.submit(load_blacklist, args.blacklist)
    warned = False

    try:
        while True:
            try:
                if show:
                    pwd = input("Password (visible): ")
                else:
                    pwd = getpass.getpass("Password (hidden): ")
            except (KeyboardInterrupt, EOFError):
                print("\nExiting.")
                break

            # Commands match exactly so that e.g. "Exit" is still a password.
            if pwd == ":show":
                show = True
                print("Visible typing enabled.")
                continue
            if pwd == ":hide":
                show = False
                print("Hidden typing enabled.")
                continue
            if pwd in (":quit", ":exit"):
                print("Exiting.")
                break

            blacklist = frozenset()
            if pending.done():
                loaded = pending.result()
                blacklist = loaded["passwords"]
                if loaded["degraded"] and not warned:
                    print(f"Warning: {DEGRADED_MESSAGE}")
                    warned = True
            else:
                log.debug("Blacklist still loading; evaluating without it")

            if not pwd:
                print(EMPTY_MESSAGE)
                continue

            for line in format_report(evaluate(pwd, blacklist)):
                print(f"  {line}")
    finally:
        # Do not block on a slow blacklist fetch once the user has left.
        pool.shutdown(wait=False, cancel_futures=True)

    return 0


if __name__ == "__main__":
    sys.exit(main())
