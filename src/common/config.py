"""Shared configuration utilities."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv

CONFIG_ENV_VAR = "FOUNDRY_TOOLS_CONFIG"


@dataclass
class ToolsConfig:
    reference_dirname: str = "reference"
    request_timeout: Optional[float] = None  # None blocks until the server answers
    claude_dir: Path = field(default_factory=lambda: Path.home() / ".claude")
    plugin_root: Optional[Path] = None
    statusline_interpreter: str = "python3"
    log_level: str = "INFO"


def load_yaml(path: Path) -> dict:
    """Load YAML file and return dict.

    Raises:
        ValueError: If the document is not a mapping
    """
    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")

    return data


def find_config_path(env_var: str = CONFIG_ENV_VAR) -> Path | None:
    """Return the YAML config path named by ``env_var``, if any.

    Raises:
        FileNotFoundError: If the variable is set but the file doesn't exist
    """
    value = os.environ.get(env_var)
    if not value:
        return None

    config_path = Path(value).expanduser()
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    return config_path


def load_config() -> ToolsConfig:
    """Load configuration from defaults, an optional YAML file and the environment.

    Precedence (lowest to highest): dataclass defaults, the YAML file named by
    ``FOUNDRY_TOOLS_CONFIG``, then individual environment variables (``.env``
    files are honoured via python-dotenv).
    """
    load_dotenv()

    config_path = find_config_path()
    data = load_yaml(config_path) if config_path else {}

    return _parse_config(data, os.environ)


def _parse_config(data: dict, env) -> ToolsConfig:
    """Parse config dictionary and environment overrides into a ToolsConfig."""
    docs_fetch = data.get("docs_fetch") or {}
    statusline = data.get("statusline") or {}
    defaults = ToolsConfig()

    timeout = env.get("DOCS_FETCH_TIMEOUT", docs_fetch.get("request_timeout"))
    claude_dir = env.get("CLAUDE_CONFIG_DIR", data.get("claude_dir"))
    plugin_root = env.get("CLAUDE_PLUGIN_ROOT", data.get("plugin_root"))

    return ToolsConfig(
        reference_dirname=env.get(
            "DOCS_FETCH_REFERENCE_DIR",
            docs_fetch.get("reference_dirname", defaults.reference_dirname),
        ),
        request_timeout=float(timeout) if timeout not in (None, "") else None,
        claude_dir=Path(claude_dir).expanduser() if claude_dir else defaults.claude_dir,
        plugin_root=Path(plugin_root).expanduser() if plugin_root else None,
        statusline_interpreter=env.get(
            "STATUSLINE_INTERPRETER",
            statusline.get("interpreter", defaults.statusline_interpreter),
        ),
        log_level=env.get("LOG_LEVEL", data.get("log_level", defaults.log_level)).upper(),
    )


# Global config instance (loaded on first access)
_config: ToolsConfig | None = None


def get_config() -> ToolsConfig:
    """Get the current configuration (lazy-loaded)."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: ToolsConfig) -> None:
    """Set the global configuration (useful for testing)."""
    global _config
    _config = config


def reset_config() -> None:
    """Reset the global configuration (forces reload on next access)."""
    global _config
    _config = None
