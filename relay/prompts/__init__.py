"""Prompt templates for LLM interactions."""

from relay.prompts.interpreter import INTERPRETER_SYSTEM_PROMPT, build_interpreter_prompt

__all__ = [
    "INTERPRETER_SYSTEM_PROMPT",
    "build_interpreter_prompt",
]
