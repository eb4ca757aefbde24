"""video-agent-skills CLI — Gemini video critique and prompt reverse-engineering.

Subcommands:
    video-agent-skills feedback -video <path>   — Critique a video
    video-agent-skills reverse -video <path>    — Reconstruct the prompt behind a video
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from google.genai import errors as genai_errors

from video_agent_skills.cancellation import Cancellation
from video_agent_skills.client import GeminiVideoClient
from video_agent_skills.config import default_config_env_path, load_api_key
from video_agent_skills.errors import UsageError, VideoAgentError
from video_agent_skills.prompts import TONE_PRESETS, resolve_prompt
from video_agent_skills.types import COMMANDS, DEFAULT_MODEL, Invocation
from video_agent_skills.verbose import VideoAgentPrinter

logger = logging.getLogger(__name__)

PROG = "video-agent-skills"
HELP_ARGS = ("-h", "--help", "help")

_EPILOG = f"""\
Examples:
  {PROG} feedback -video ./examples/RefreshAgent-Demo-30s.mp4
  {PROG} feedback -video ./examples/RefreshAgent-Demo-30s.mp4 -tone nice
  {PROG} reverse -video ./examples/RefreshAgent-Demo-30s.mp4
"""


def _add_common_flags(p: argparse.ArgumentParser, prompt_help: str) -> None:
    p.add_argument("-video", "--video", metavar="PATH", help="Path to a video file (required)")
    p.add_argument(
        "-model", "--model", default=DEFAULT_MODEL,
        help=f"Gemini model name (default: {DEFAULT_MODEL})"
    )
    p.add_argument("-prompt", "--prompt", default=None, help=prompt_help)
    p.add_argument(
        "-api-key", "--api-key", dest="api_key", default=None,
        help="Gemini API key (overrides GEMINI_API_KEY/GOOGLE_API_KEY)"
    )
    p.add_argument(
        "-timeout", "--timeout", type=float, default=None, metavar="SECONDS",
        help="Give up after this many seconds (default: wait for the upload indefinitely)"
    )
    p.add_argument("-verbose", "--verbose", action="store_true", help="Log each API step")
    p.add_argument("-quiet", "--quiet", action="store_true", help="Hide progress output")


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Critique a video or reverse-engineer its prompt with Gemini.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    subparsers = parser.add_subparsers(dest="command", metavar="{feedback,reverse}")

    tones = ", ".join(TONE_PRESETS)

    # --- feedback ---
    p_feedback = subparsers.add_parser(
        "feedback", help="Critique a video", allow_abbrev=False
    )
    _add_common_flags(p_feedback, "Prompt to guide feedback (overrides -tone)")
    p_feedback.add_argument(
        "-tone", "--tone", default=None, metavar="TONE",
        help=f"Feedback tone preset: {tones} (default: harsh)"
    )
    p_feedback.set_defaults(format_usage=p_feedback.format_usage)

    # --- reverse ---
    p_reverse = subparsers.add_parser(
        "reverse", help="Reverse-engineer the prompt behind a video", allow_abbrev=False
    )
    _add_common_flags(p_reverse, "Prompt override for reverse engineering")
    p_reverse.add_argument("-tone", "--tone", default=None, help=argparse.SUPPRESS)
    p_reverse.set_defaults(format_usage=p_reverse.format_usage)

    return parser


def build_invocation(args: argparse.Namespace) -> Invocation:
    """Validate parsed flags and resolve the instruction text.

    Raises:
        UsageError: ``-video`` is missing or ``-tone`` is unknown.
    """
    if not args.video:
        raise UsageError("-video is required")

    prompt = resolve_prompt(args.command, prompt=args.prompt, tone=args.tone)
    return Invocation(
        command=args.command,
        video=Path(args.video),
        model=args.model,
        prompt=prompt,
        tone=args.tone,
        api_key=args.api_key,
        timeout=args.timeout,
    )


def cmd_video(args: argparse.Namespace, printer: VideoAgentPrinter) -> None:
    """Run ``feedback`` or ``reverse`` and print the model's answer on stdout."""
    invocation = build_invocation(args)
    api_key = load_api_key(invocation.api_key, default_config_env_path())

    printer.print_header(invocation.command, {
        "Video": invocation.video.name,
        "Model": invocation.model,
        "Tone": (invocation.tone or "default") if invocation.command == "feedback" else "n/a",
    })

    cancel = Cancellation.with_timeout(invocation.timeout)
    client = GeminiVideoClient(api_key, timeout=invocation.timeout)

    def _progress(file) -> None:
        state = getattr(file.state, "name", None) or str(file.state)
        printer.print_step("Processing video", f"state={state}")

    printer.print_step("Uploading", str(invocation.video))
    t0 = time.time()
    text = client.run(invocation, cancel=cancel, progress_callback=_progress)
    printer.print_step_done("Response received", invocation.model, elapsed=time.time() - t0)

    print(text)


def _configure_logging(args: argparse.Namespace) -> None:
    level = logging.INFO if getattr(args, "verbose", False) else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", stream=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()

    if not argv or argv[0] in HELP_ARGS:
        parser.print_help()
        return 0

    if argv[0] not in COMMANDS:
        print(f"Unknown command: {argv[0]}\n", file=sys.stderr)
        parser.print_help(sys.stderr)
        return 1

    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # argparse exits 0 for -h and 2 for bad flags
        return e.code if isinstance(e.code, int) else 2

    _configure_logging(args)
    printer = VideoAgentPrinter(enabled=not args.quiet)

    try:
        cmd_video(args, printer)
    except UsageError as e:
        printer.print_error(str(e))
        sys.stderr.write(args.format_usage())
        return 2
    except (VideoAgentError, genai_errors.APIError, OSError) as e:
        printer.print_error(str(e))
        return 1
    except KeyboardInterrupt:
        printer.print_error("interrupted")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
