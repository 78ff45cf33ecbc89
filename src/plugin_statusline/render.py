#!/usr/bin/env python3
"""
Status line renderer.

Reads the session JSON the assistant pipes to status line commands and
prints three rows: style/model/cost/api time, context metrics, and the
working path. This file is copied out of the package by the sync hook and
run on its own, so it only uses the standard library.
"""

import json
import math
import os
import posixpath
import re
import sys

RESET = "\x1b[0m"
MAX_PATH_WIDTH = 50
ELLIPSIS = "..."


def ansi256(n):
    return f"\x1b[38;5;{n}m"


def color(color_num, text):
    return f"{ansi256(color_num)}{text}{RESET}"


# pastel 256-colour palette
def gray(text):
    return color(245, text)


def green(text):
    return color(151, text)


def yellow(text):
    return color(223, text)


def blue(text):
    return color(153, text)


def magenta(text):
    return color(182, text)


# (minimum remaining percent, colour); brighter as the context runs out
URGENCY_STEPS = (
    (60, 245),
    (50, 251),
    (40, 228),
    (30, 220),
    (20, 208),
    (10, 196),
)


def color_by_urgency(percent, text):
    for threshold, color_num in URGENCY_STEPS:
        if percent >= threshold:
            return color(color_num, text)
    return color(197, text)


def get_path(data, *keys, default=None):
    """Walk nested dicts; missing keys and nulls yield ``default``."""
    value = data
    for key in keys:
        if not isinstance(value, dict):
            return default
        value = value.get(key)
    return default if value is None else value


def round_half_up(value):
    """Round half up."""
    return math.floor(value + 0.5)


def format_style_model(data):
    style = get_path(data, "output_style", "name", default="default")
    model = get_path(data, "model", "display_name", default="unknown")

    # drop a "plugin:" prefix
    if ":" in style:
        style = style.split(":", 1)[1].strip()

    return f"{green(style)} {yellow(f'({model})')}"


def trim_middle(text, max_width):
    """Trim from the middle: "very-long-folder-name" -> "very-...name" for 12."""
    if len(text) <= max_width:
        return text

    available = max_width - len(ELLIPSIS)
    if available <= 0:
        return text[:max_width]

    head = math.ceil(available / 2)
    tail = available // 2
    return text[:head] + ELLIPSIS + text[len(text) - tail:]


def collapse_path(path, max_width):
    """
    Fold a path to ``max_width``.

    Parent segments are shortened to their first letter, then (for deep
    paths) replaced by an ellipsis from the second segment on, and finally
    the basename is trimmed in the middle.
    """
    if len(path) <= max_width:
        return path

    overdue = len(path) - max_width
    segments = posixpath.dirname(path).split("/")

    for i, segment in enumerate(segments):
        overdue -= len(segment) - 1
        segments[i] = segment[:1]
        if overdue <= 0:
            break

    if len(segments) > 2 and overdue > 0:
        for i in range(1, len(segments)):
            overdue -= len(segments[i]) + 1
            if i == 1:
                overdue -= len(segments[i]) - 1
                segments[i] = ELLIPSIS
            else:
                segments[i] = ""
            if overdue <= 0:
                break

    basename = posixpath.basename(path)
    if overdue > 0:
        basename = trim_middle(basename, max(len(basename) - overdue, 0))

    prefix = "/" if path.startswith("/") else ""
    return prefix + posixpath.join(*[seg for seg in segments if seg], basename)


def to_unix_path(path):
    """Normalise separators to "/"; a leading root is dropped."""
    return posixpath.normpath(posixpath.join(*re.split(r"[/\\]", path)))


def format_path(data):
    cwd = to_unix_path(get_path(data, "cwd") or get_path(data, "workspace", "current_dir", default=""))
    project_dir = to_unix_path(get_path(data, "workspace", "project_dir", default=""))

    rel_path = posixpath.relpath(cwd, project_dir)
    if rel_path == ".":
        home = to_unix_path(os.path.expanduser("~"))
        if project_dir.startswith(home):
            return collapse_path("~" + project_dir[len(home):], MAX_PATH_WIDTH)
        return collapse_path(project_dir, MAX_PATH_WIDTH)

    # below the project root: "$/" stands for the root
    return collapse_path("$/" + rel_path, MAX_PATH_WIDTH)


def format_cost(data):
    cost = get_path(data, "cost", "total_cost_usd", default=0)
    return magenta(f"${cost:.2f}")


def format_api_time(data):
    seconds = get_path(data, "cost", "total_api_duration_ms", default=0) / 1000
    if seconds < 60:
        return gray(f"{seconds:.1f}s api")
    minutes = math.floor(seconds / 60)
    return f"{minutes}m{round_half_up(seconds % 60)}s api"


def format_context_remaining(data):
    remaining = get_path(data, "context_window", "remaining_percentage")
    value = gray("--.--%")
    if remaining is not None:
        value = color_by_urgency(remaining, f"{remaining:.2f}%")
    return f"ctx left {value}"


def format_token_ratio(data):
    total_in = get_path(data, "context_window", "total_input_tokens")
    total_out = get_path(data, "context_window", "total_output_tokens")

    ratio = "--%"
    if total_in and total_out:
        ratio = f"{round_half_up(total_in / (total_in + total_out) * 100)}%"
    return f"inp÷out {ratio}"


def format_cache_efficiency(data):
    usage = get_path(data, "context_window", "current_usage")
    if not usage:
        return "cache --%"

    fresh = usage.get("input_tokens") or 0
    cache_read = usage.get("cache_read_input_tokens") or 0
    cache_write = usage.get("cache_creation_input_tokens") or 0
    total = fresh + cache_read + cache_write
    if total == 0:
        return "cache --%"

    return f"cache {round_half_up(cache_read / total * 100)}%"


def render(data):
    rows = [
        gray(" | ").join([format_style_model(data), format_cost(data), format_api_time(data)]),
        " | ".join([
            format_context_remaining(data),
            format_token_ratio(data),
            format_cache_efficiency(data),
        ]),
        blue(format_path(data)),
    ]
    return "\n".join(rows)


def main():
    try:
        data = json.loads(sys.stdin.read())
    except ValueError as err:
        print(f"statusline: invalid session data: {err}", file=sys.stderr)
        return
    sys.stdout.write(render(data))


if __name__ == "__main__":
    main()
