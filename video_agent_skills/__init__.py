"""video-agent-skills: Gemini video critique and prompt reverse-engineering.

Uploads a local video to the Gemini File API, waits until it is processed and
asks a Gemini model for feedback or for the prompt that likely produced it.
"""

from __future__ import annotations

from video_agent_skills.prompts import DEFAULT_FEEDBACK_PROMPT, REVERSE_PROMPT, TONE_PRESETS
from video_agent_skills.types import Invocation

__version__ = "0.3.0"

__all__ = [
    "DEFAULT_FEEDBACK_PROMPT",
    "Invocation",
    "REVERSE_PROMPT",
    "TONE_PRESETS",
]
