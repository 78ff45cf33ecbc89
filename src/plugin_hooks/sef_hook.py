"""
Skill enforcement framework (SEF) hook.

One script serves several hook events; the event is selected by the first
command-line argument (``session-start``, ``prompt``, ``read``, ``write``,
``skill``). Session start injects the full framework, every other action
injects a short tag that refers back to it.
"""

from __future__ import annotations

import sys
from typing import Any

from plugin_hooks.helpers import emit, hook_output

FRAMEWORK = """<skill-enforcement-framework id="SEF">
SEF governs skill invocation throughout this session.

## Protocol

<constraint>
Proceeding without completing the action is FORBIDDEN.
Acknowledging tags without acting is a violation.
You MUST state your evaluation result in thinking before tool use.
</constraint>

<verification>
After invoking skills, verify: Did I call Skill() for each identified
skill, or only acknowledge them in text? If acknowledge-only, invoke NOW.
</verification>

## Tags

<SEF_PROMPT>
User prompt received. Evaluate skills BEFORE any tool use.
1. CLASSIFY: Task domain?
2. MATCH: Skills whose coverage INCLUDES this task?
3. CHECK: Already invoked vs missing?
4. INVOKE: Call Skill() for each missing
5. RE-EVALUATE: New context may reveal more skills

Output in thinking: "SEF: [domain] → invoke [skills] | none needed"
</SEF_PROMPT>

<SEF_EVAL>
Context gathered. Evaluate skills NOW.
1. Review context to understand task domain
2. Identify skills whose coverage matches
3. If missing, invoke BEFORE continuing
4. Multiple may apply—invoke ALL in batch

Output in thinking: "SEF: [domain] → invoke [skills] | none needed"
</SEF_EVAL>

<SEF_PHASE>
Code modified. Phase may have shifted.
1. Assess phase: coding → testing → review
2. If changed, re-read skill references for new phase
3. Check phase-specific guidance (testing docs, validation)
4. Consider if quality-validation now applies

Output in thinking: "SEF: phase [current] → re-read [refs] | same phase"
</SEF_PHASE>

<SEF_REFS>
Skill loaded. Check batch opportunities.
1. Need more skills? Invoke together NOW
2. Read loaded skill's references/ for current phase

Output in thinking: "SEF: batch [additional skills] | complete"
</SEF_REFS>
</skill-enforcement-framework>"""

# action -> (hook event, injected context)
RESPONSES = {
    "session-start": ("SessionStart", FRAMEWORK),
    "prompt": ("UserPromptSubmit", "<SEF_PROMPT/>"),
    "read": ("PostToolUse", "<SEF_EVAL/>"),
    "write": ("PostToolUse", "<SEF_PHASE/>"),
    "skill": ("PostToolUse", "<SEF_REFS/>"),
}


def build_response(action: str | None) -> dict[str, Any]:
    """Return the hook response for ``action``.

    Unknown actions do not block the session; they surface a system message
    instead.
    """
    if action not in RESPONSES:
        return {
            "continue": True,
            "systemMessage": (
                f'SEF hook error: Unknown action "{action}". '
                f"Valid: {', '.join(RESPONSES)}"
            ),
        }

    event, context = RESPONSES[action]
    return hook_output(event, context)


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    emit(build_response(argv[0] if argv else None))


if __name__ == "__main__":
    main()
