"""Tests for plugin_hooks.skill_reminder and plugin_hooks.helpers."""

import io
import json
from unittest.mock import patch

from plugin_hooks.helpers import drain_stdin, emit, hook_output
from plugin_hooks.skill_reminder import MESSAGE, main


class TestHookOutput:
    def test_shape(self) -> None:
        assert hook_output("SessionStart", "ctx") == {
            "hookSpecificOutput": {"hookEventName": "SessionStart", "additionalContext": "ctx"}
        }


class TestEmit:
    def test_single_json_line(self) -> None:
        stream = io.StringIO()
        emit({"continue": True}, stream)
        assert stream.getvalue() == '{"continue": true}\n'


class TestDrainStdin:
    def test_reads_everything(self) -> None:
        assert drain_stdin(io.StringIO('{"prompt": "hi"}')) == '{"prompt": "hi"}'


class TestSkillReminderMain:
    def test_emits_reminder_after_consuming_stdin(self, capsys) -> None:
        stdin = io.StringIO('{"hook_event_name": "UserPromptSubmit"}')
        with patch("sys.stdin", stdin):
            main()

        assert stdin.read() == ""
        output = json.loads(capsys.readouterr().out)
        assert output["hookSpecificOutput"]["hookEventName"] == "UserPromptSubmit"
        assert output["hookSpecificOutput"]["additionalContext"] == MESSAGE

    def test_message_is_tagged(self) -> None:
        assert MESSAGE.startswith("<skill-evaluation-required>")
        assert MESSAGE.endswith("</skill-evaluation-required>")
