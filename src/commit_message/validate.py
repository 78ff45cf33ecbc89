"""Validate commit messages against repository conventions."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

SUBJECT_MIN_LENGTH = 10
SUBJECT_MAX_LENGTH = 72
MESSAGE_MAX_LENGTH = 1000
MESSAGE_MAX_LINES = 50


@dataclass
class ValidationResult:
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def validate_subject(subject: str, result: ValidationResult) -> None:
    if len(subject) < SUBJECT_MIN_LENGTH:
        result.warnings.append(
            "Subject line is very short (less than 10 characters). "
            "Consider making it more descriptive."
        )

    if len(subject) > SUBJECT_MAX_LENGTH:
        result.errors.append(f"Subject line exceeds maximum of {SUBJECT_MAX_LENGTH} characters.")

    if subject.endswith("."):
        result.errors.append("Subject line should not end with a period.")


def validate_message(message: str | None) -> ValidationResult:
    """Check a commit message and collect errors and warnings."""
    result = ValidationResult()

    if not message or not message.strip():
        result.errors.append("Commit message is empty.")
        return result

    if len(message) > MESSAGE_MAX_LENGTH:
        result.warnings.append(
            "Commit message is very long (over 1000 characters). Consider shortening it."
        )

    lines = [line.strip() for line in message.split("\n")]

    if len(lines) > MESSAGE_MAX_LINES:
        result.warnings.append("Commit message has more than 50 lines. Consider shortening it.")

    validate_subject(lines[0], result)

    if len(lines) == 1:
        result.warnings.append("Commit messages containing only subject line are discouraged.")
    elif lines[1] != "":
        result.errors.append("Subject must be separated from body by a blank line.")

    return result


def read_message(args: argparse.Namespace, stdin: TextIO) -> str:
    """Return the message from exactly one of --file, --msg or piped stdin.

    Raises:
        ValueError: if no source or more than one source was given.
        OSError: if --file cannot be read.
    """
    piped = "" if stdin.isatty() else stdin.read()

    if sum(bool(source) for source in (args.file, args.msg, piped)) > 1:
        raise ValueError("Only one of --file, --msg, or stdin may be used at a time.")

    if args.file:
        return Path(args.file).read_text(encoding="utf-8")
    if args.msg:
        return args.msg
    if piped:
        return piped

    raise ValueError("No commit message provided. Use --file, --msg, or stdin.")


def print_result(result: ValidationResult, stream: TextIO | None = None) -> None:
    stream = stream or sys.stdout
    for warning in result.warnings:
        print(f"WARN: {warning}", file=stream)
    for error in result.errors:
        print(f"ERROR: {error}", file=stream)
    if result.ok:
        print("OK: Commit message is valid.", file=stream)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="validate-commit-message",
        description="Validate a commit message (from --file, --msg, or stdin).",
    )
    parser.add_argument("--file", help="Path to a file holding the commit message")
    parser.add_argument("--msg", help="Commit message text")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    try:
        message = read_message(args, sys.stdin)
    except OSError as e:
        print(f"ERROR: Cannot read file: {args.file} ({e.strerror})", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    result = validate_message(message)
    print_result(result)
    sys.exit(0 if result.ok else 1)


if __name__ == "__main__":
    main()
