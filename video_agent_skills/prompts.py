"""Instruction texts sent to Gemini alongside the uploaded video."""

from __future__ import annotations

import logging

from video_agent_skills.errors import UsageError

logger = logging.getLogger(__name__)

_OUTPUT_FORMAT = (
    "Output format:\n"
    "1) Quick read (2-3 sentences)\n"
    "2) Strengths (2 bullets max)\n"
    "3) Issues (6 bullets)\n"
    "4) Improvements (6 bullets, each with a concrete fix; include approximate "
    "timecodes if possible)."
)

_CRITIQUE_SCOPE = (
    "Critique storytelling, camera movement, visibility/legibility of key elements, "
    "timing, and overall professional polish, plus pacing, rhythm, transitions, "
    "typography, composition, color, and easing."
)

TONE_PRESETS: dict[str, str] = {
    "nice": (
        "You are a senior motion designer and creative director mentoring a colleague. "
        "Be warm and encouraging, but honest. "
        f"{_CRITIQUE_SCOPE} "
        "Lead with what works, then frame problems as opportunities. "
        f"{_OUTPUT_FORMAT}"
    ),
    "normal": (
        "You are a senior motion designer and creative director. "
        "Be balanced and constructive. "
        f"{_CRITIQUE_SCOPE} "
        "Give credit where it is earned and be clear about what needs work. "
        f"{_OUTPUT_FORMAT}"
    ),
    "harsh": (
        "You are a senior motion designer and creative director. "
        "Be direct and a bit harsh. "
        f"{_CRITIQUE_SCOPE} "
        "Call out what looks amateurish or generic. "
        "Provide more improvement ideas than praise. "
        f"{_OUTPUT_FORMAT}"
    ),
    "super-harsh": (
        "You are a senior motion designer and creative director reviewing work for a "
        "top-tier studio reel. Be blunt and unsparing; do not soften anything. "
        f"{_CRITIQUE_SCOPE} "
        "Call out every moment that looks amateurish, generic, or lazy, and say why it "
        "would be rejected. Keep praise to the bare minimum. "
        f"{_OUTPUT_FORMAT}"
    ),
}

TONE_ALIASES: dict[str, str] = {
    "superharsh": "super-harsh",
}

DEFAULT_TONE = "harsh"

DEFAULT_FEEDBACK_PROMPT = TONE_PRESETS[DEFAULT_TONE]

REVERSE_PROMPT = (
    "You are reverse-engineering the prompt that likely produced this video. "
    "Infer subject, style, camera behavior, motion language, lighting, typography, "
    "color palette, aspect ratio, duration, and rendering style. "
    "Output only a single reconstructed prompt as one paragraph. "
    "No preamble, no bullets, no explanations."
)


def tone_prompt(tone: str) -> str:
    """Return the preset text for a tone label (case-insensitive)."""
    label = tone.strip().lower()
    label = TONE_ALIASES.get(label, label)
    try:
        return TONE_PRESETS[label]
    except KeyError:
        allowed = ", ".join(TONE_PRESETS)
        raise UsageError(f"unknown tone {tone!r}: expected one of {allowed}") from None


def resolve_prompt(command: str, prompt: str | None = None, tone: str | None = None) -> str:
    """Pick the instruction text for a command.

    An explicit prompt always wins. ``feedback`` otherwise uses the tone preset
    (or the default one); ``reverse`` has a single fixed prompt and ignores tone.
    """
    if command == "reverse":
        if tone:
            logger.warning("tone is ignored for the reverse command")
        return prompt if prompt else REVERSE_PROMPT

    if command != "feedback":
        raise UsageError(f"unknown command: {command}")

    if prompt:
        return prompt
    if tone:
        return tone_prompt(tone)
    return DEFAULT_FEEDBACK_PROMPT
