"""Helpers shared by plugin lifecycle hooks."""

import json
import sys
from typing import Any, TextIO


def hook_output(event: str, context: str) -> dict[str, Any]:
    """Build the hook response that injects ``context`` for ``event``."""
    return {
        "hookSpecificOutput": {
            "hookEventName": event,
            "additionalContext": context,
        }
    }


def emit(payload: dict[str, Any], stream: TextIO | None = None) -> None:
    """Write a hook response as a single JSON line."""
    stream = stream or sys.stdout
    stream.write(json.dumps(payload) + "\n")


def drain_stdin(stream: TextIO | None = None) -> str:
    """Read the hook event payload; the protocol requires stdin to be consumed."""
    return (stream or sys.stdin).read()
