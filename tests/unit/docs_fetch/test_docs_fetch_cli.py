"""Tests for docs_fetch.cli module."""

import argparse
from unittest.mock import patch

import pytest

from common.config import ToolsConfig
from docs_fetch.cli import add_docs_fetch_args, main, run_docs_fetch
from docs_fetch.errors import InventoryNotFoundError, InventoryValidationError


class TestAddDocsFetchArgs:
    def test_positional_inventory_and_dirty_default(self) -> None:
        parser = add_docs_fetch_args(argparse.ArgumentParser())
        args = parser.parse_args(["skills/reference-inventory.json"])
        assert args.inventory == "skills/reference-inventory.json"
        assert args.dirty is False

    def test_dirty_flag(self) -> None:
        parser = add_docs_fetch_args(argparse.ArgumentParser())
        assert parser.parse_args(["inv.json", "--dirty"]).dirty is True

    def test_inventory_is_required(self) -> None:
        parser = add_docs_fetch_args(argparse.ArgumentParser())
        with pytest.raises(SystemExit):
            parser.parse_args([])


class TestRunDocsFetch:
    @patch("docs_fetch.cli.get_config")
    @patch("docs_fetch.cli.docs_fetch")
    def test_success_returns_zero(self, mock_docs_fetch, mock_config) -> None:
        config = ToolsConfig()
        mock_config.return_value = config

        code = run_docs_fetch(argparse.Namespace(inventory="inv.json", dirty=True))

        assert code == 0
        mock_docs_fetch.assert_called_once_with("inv.json", dirty=True, config=config)

    @patch("docs_fetch.cli.get_config", return_value=ToolsConfig())
    @patch("docs_fetch.cli.docs_fetch")
    def test_missing_inventory_returns_one(self, mock_docs_fetch, mock_config) -> None:
        mock_docs_fetch.side_effect = InventoryNotFoundError("Inventory not found: inv.json")

        assert run_docs_fetch(argparse.Namespace(inventory="inv.json", dirty=False)) == 1

    @patch("docs_fetch.cli.get_config", return_value=ToolsConfig())
    @patch("docs_fetch.cli.docs_fetch")
    def test_invalid_inventory_returns_one(self, mock_docs_fetch, mock_config) -> None:
        mock_docs_fetch.side_effect = InventoryValidationError("bad")

        assert run_docs_fetch(argparse.Namespace(inventory="inv.json", dirty=False)) == 1


class TestMain:
    @patch("docs_fetch.cli.setup_logging")
    @patch("docs_fetch.cli.get_config", return_value=ToolsConfig())
    @patch("docs_fetch.cli.docs_fetch")
    def test_exits_with_run_status(self, mock_docs_fetch, mock_config, mock_logging) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["inv.json"])

        assert exc_info.value.code == 0
        mock_logging.assert_called_once_with("INFO")
        mock_docs_fetch.assert_called_once_with("inv.json", dirty=False, config=mock_config.return_value)
