"""Tests for plugin_hooks.sync_statusline module."""

import json
from pathlib import Path
from unittest.mock import patch

from common.config import ToolsConfig, reset_config
from plugin_hooks.sync_statusline import (
    main,
    patch_settings,
    renderer_source,
    sync_statusline,
)
from plugin_statusline import render


def _config(tmp_path, **kwargs) -> ToolsConfig:
    return ToolsConfig(claude_dir=tmp_path / ".claude", **kwargs)


class TestPatchSettings:
    def test_adds_status_line(self) -> None:
        settings = {"theme": "dark"}
        assert patch_settings(settings, "python3 /x/statusline.py") is True
        assert settings == {
            "theme": "dark",
            "statusLine": {"type": "command", "command": "python3 /x/statusline.py"},
        }

    def test_keeps_other_status_line_keys(self) -> None:
        settings = {"statusLine": {"type": "static", "padding": 1}}
        patch_settings(settings, "cmd")
        assert settings["statusLine"] == {"type": "command", "padding": 1, "command": "cmd"}

    def test_unchanged_when_already_current(self) -> None:
        settings = {"statusLine": {"type": "command", "command": "cmd"}}
        assert patch_settings(settings, "cmd") is False

    def test_replaces_non_object_value(self) -> None:
        settings = {"statusLine": "weird"}
        assert patch_settings(settings, "cmd") is True
        assert settings["statusLine"] == {"type": "command", "command": "cmd"}


class TestRendererSource:
    def test_packaged_renderer_by_default(self, tmp_path) -> None:
        assert renderer_source(_config(tmp_path)) == Path(render.__file__)

    def test_plugin_root(self, tmp_path) -> None:
        plugin_root = tmp_path / "plugin"
        plugin_root.mkdir()
        (plugin_root / "statusline.py").write_text("print('custom')\n")

        config = _config(tmp_path, plugin_root=plugin_root)

        assert renderer_source(config) == plugin_root / "statusline.py"

    def test_plugin_root_without_renderer_falls_back(self, tmp_path) -> None:
        plugin_root = tmp_path / "plugin"
        plugin_root.mkdir()

        config = _config(tmp_path, plugin_root=plugin_root)

        assert renderer_source(config) == Path(render.__file__)


class TestSyncStatusline:
    def test_installs_renderer_and_creates_settings(self, tmp_path) -> None:
        config = _config(tmp_path)

        target = sync_statusline(config)

        claude_dir = tmp_path / ".claude"
        assert target == claude_dir / "statusline.py"
        assert target.read_bytes() == Path(render.__file__).read_bytes()
        settings_text = (claude_dir / "settings.json").read_text(encoding="utf-8")
        assert settings_text.endswith("}\n")
        assert json.loads(settings_text) == {
            "statusLine": {"type": "command", "command": f"python3 {target}"}
        }

    def test_copies_from_plugin_root(self, tmp_path) -> None:
        plugin_root = tmp_path / "plugin"
        plugin_root.mkdir()
        (plugin_root / "statusline.py").write_text("print('custom')\n")

        target = sync_statusline(_config(tmp_path, plugin_root=plugin_root))

        assert target.read_text() == "print('custom')\n"

    def test_installs_packaged_renderer_when_plugin_root_is_empty(self, tmp_path) -> None:
        plugin_root = tmp_path / "plugin"
        plugin_root.mkdir()

        target = sync_statusline(_config(tmp_path, plugin_root=plugin_root))

        assert target.read_bytes() == Path(render.__file__).read_bytes()

    def test_leaves_current_settings_untouched(self, tmp_path) -> None:
        claude_dir = tmp_path / ".claude"
        claude_dir.mkdir()
        target = claude_dir / "statusline.py"
        original = '{"statusLine": {"type": "command", "command": "python3 %s"}}' % target
        (claude_dir / "settings.json").write_text(original)

        sync_statusline(_config(tmp_path))

        assert (claude_dir / "settings.json").read_text() == original

    def test_uses_configured_interpreter(self, tmp_path) -> None:
        target = sync_statusline(_config(tmp_path, statusline_interpreter="uv run python"))
        settings = json.loads((tmp_path / ".claude" / "settings.json").read_text())
        assert settings["statusLine"]["command"] == f"uv run python {target}"


class TestMain:
    def teardown_method(self) -> None:
        reset_config()

    @patch("plugin_hooks.sync_statusline.get_config")
    def test_errors_are_logged_not_raised(self, mock_config, tmp_path, caplog) -> None:
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("")
        mock_config.return_value = ToolsConfig(claude_dir=blocker)

        main()

        assert any("not-a-dir" in r.getMessage() for r in caplog.records)

    @patch("common.config.load_dotenv")
    def test_malformed_config_file_logged(self, mock_dotenv, monkeypatch, tmp_path, caplog) -> None:
        config_file = tmp_path / "tools.yaml"
        config_file.write_text("key: [unterminated\n")
        monkeypatch.setenv("FOUNDRY_TOOLS_CONFIG", str(config_file))
        reset_config()

        main()

        assert [r.levelname for r in caplog.records] == ["ERROR"]

    @patch("common.config.load_dotenv")
    def test_non_mapping_config_file_logged(self, mock_dotenv, monkeypatch, tmp_path, caplog) -> None:
        config_file = tmp_path / "tools.yaml"
        config_file.write_text("- a\n- b\n")
        monkeypatch.setenv("FOUNDRY_TOOLS_CONFIG", str(config_file))
        reset_config()

        main()

        assert any("must contain a mapping" in r.getMessage() for r in caplog.records)

    @patch("plugin_hooks.sync_statusline.get_config")
    def test_invalid_settings_logged(self, mock_config, tmp_path, caplog) -> None:
        claude_dir = tmp_path / ".claude"
        claude_dir.mkdir()
        (claude_dir / "settings.json").write_text("[1, 2]")
        mock_config.return_value = _config(tmp_path)

        main()

        assert any("must contain a JSON object" in r.getMessage() for r in caplog.records)
