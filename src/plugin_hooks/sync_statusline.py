"""
SessionStart hook that installs the status line renderer into the
user-level assistant configuration directory and points settings.json at it.
"""

import logging
import shutil
from pathlib import Path
from typing import Any, Optional

import yaml

from common.config import ToolsConfig, get_config
from common.local_io import read_json, write_json
from plugin_statusline import render as statusline_render

logger = logging.getLogger(__name__)

RENDERER_NAME = "statusline.py"
SETTINGS_NAME = "settings.json"


def renderer_source(config: ToolsConfig) -> Path:
    """Renderer shipped in the plugin root, else the packaged copy."""
    if config.plugin_root is not None:
        candidate = config.plugin_root / RENDERER_NAME
        if candidate.is_file():
            return candidate
        logger.debug("No renderer in %s, using packaged copy", config.plugin_root)

    return Path(statusline_render.__file__)


def statusline_command(config: ToolsConfig, target: Path) -> str:
    return f"{config.statusline_interpreter} {target}"


def patch_settings(settings: dict[str, Any], command: str) -> bool:
    """Point ``statusLine`` at ``command``, keeping its other keys.

    Returns True when ``settings`` was changed.
    """
    current = settings.get("statusLine")
    if not isinstance(current, dict):
        current = {}

    if current.get("type") == "command" and current.get("command") == command:
        return False

    settings["statusLine"] = {**current, "type": "command", "command": command}
    return True


def sync_statusline(config: Optional[ToolsConfig] = None) -> Path:
    """Copy the renderer and update settings.json; returns the installed renderer path."""
    config = config or get_config()
    claude_dir = config.claude_dir
    settings_path = claude_dir / SETTINGS_NAME
    target = claude_dir / RENDERER_NAME

    claude_dir.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(renderer_source(config), target)

    settings = read_json(settings_path) if settings_path.exists() else {}
    if not isinstance(settings, dict):
        raise ValueError(f"{settings_path} must contain a JSON object")

    if patch_settings(settings, statusline_command(config, target)):
        write_json(settings_path, settings)
        logger.info("Updated statusLine in %s", settings_path)

    return target


def main() -> None:
    logging.basicConfig(format="[statusline-sync] %(message)s")
    try:
        sync_statusline()
    except (OSError, ValueError, yaml.YAMLError) as err:
        # Never block session start.
        logger.error("%s", err)


if __name__ == "__main__":
    main()
