"""video-agent-skills configuration types."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_MODEL = "gemini-3-flash-preview"
DEFAULT_MIME_TYPE = "video/mp4"
POLL_INTERVAL_SECONDS = 5.0

COMMANDS = ("feedback", "reverse")


@dataclass(frozen=True)
class Invocation:
    """A fully resolved command invocation.

    Args:
        command: Sub-command name, ``"feedback"`` or ``"reverse"``.
        video: Path to the local video file.
        model: Gemini model name used for generation.
        prompt: Instruction text sent next to the uploaded video.
        tone: Tone label as given on the command line, if any.
        api_key: Explicit ``-api-key`` override, if any.
        timeout: Optional overall deadline in seconds. None waits forever.
    """

    command: str
    video: Path
    model: str = DEFAULT_MODEL
    prompt: str = ""
    tone: str | None = None
    api_key: str | None = None
    timeout: float | None = None
