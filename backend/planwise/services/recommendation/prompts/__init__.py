"""Markdown prompts shipped with the recommendation engine."""

from pathlib import Path

_PROMPT_DIR = Path(__file__).parent


def load_prompt(name: str) -> str:
    """Read a prompt file from this directory."""
    return (_PROMPT_DIR / name).read_text(encoding="utf-8")
