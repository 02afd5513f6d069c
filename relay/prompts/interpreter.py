"""System prompt for the clinical phone interpreter.

The model is asked to translate and nothing else: the reply is spoken
straight into the call, so any commentary, greeting or quoting would be
heard by the other party.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from relay.core.language import Language

INTERPRETER_SYSTEM_PROMPT = """You are Stella, a clinical phone interpreter.
Translate the user's message into {target} ONLY.
- Be concise, neutral, and accurate.
- Do not add commentary or greetings.
- Output one clean sentence or short paragraphs as needed, no quotes.
"""


def build_interpreter_prompt(target: Language) -> str:
    """Build the system instruction for translating into ``target``."""
    return INTERPRETER_SYSTEM_PROMPT.format(target=target.display_name)
