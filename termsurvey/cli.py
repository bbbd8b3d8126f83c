"""Command-line front door for termsurvey.

Runs a sample questionnaire on the current terminal and prints the answers
as JSON. Flags override the saved preferences file.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from .config import (
    SelectionDefaults,
    load_render_config,
    load_selection_defaults,
    save_no_color,
    save_selection_defaults,
    save_theme_name,
)
from .errors import InterruptError, SurveyError
from .prompts import Confirm, Input, MultiSelect, Select
from .session import PromptSession
from .survey import Question, ask
from .theme import available_theme_names
from .transformers import title
from .validators import compose_validators, max_length, required

DAYS = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
COLORS = ("red", "orange", "yellow", "green", "blue", "indigo", "violet", "black", "white")


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_demo_questions(page_size: int, vim_mode: bool) -> list[Question]:
    """Return the sample questionnaire shown by the CLI."""
    color = Select(
        message="Choose a color:",
        help="Type to filter the list.",
        page_size=page_size,
        vim_mode=vim_mode,
    )
    for name in COLORS:
        color.add_string_option(name, default=name == "blue")

    days = MultiSelect(message="What days do you prefer:", page_size=page_size, vim_mode=vim_mode)
    for day in DAYS:
        days.add_string_option(day, default=day in {"Saturday", "Sunday"})

    return [
        Question(
            "name",
            Input(message="What is your name?", help="Used to greet you."),
            compose_validators(required, max_length(40)),
            title,
        ),
        Question("color", color, required),
        Question("days", days),
        Question("likes_pie", Confirm(message="Do you like pie?", default=True)),
    ]


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run the sample questionnaire."""
    parser = argparse.ArgumentParser(description="Ask a sample questionnaire in the terminal.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", dest="no_color", action="store_true", help="Disable color output.")
    parser.add_argument("--color", dest="no_color", action="store_false", help="Enable color output.")
    parser.add_argument("--page-size", type=_positive_int, default=None, help="Options shown per page.")
    parser.add_argument(
        "--vim",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Start list prompts in vim navigation mode.",
    )
    parser.add_argument("--save", action="store_true", help="Persist the given flags as preferences.")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=("debug", "info", "warning", "error"),
        help="Log to stderr at this level.",
    )
    parser.set_defaults(no_color=None)
    args = parser.parse_args(argv)

    if args.log_level is not None:
        logging.basicConfig(
            level=args.log_level.upper(),
            stream=sys.stderr,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

    saved = load_selection_defaults()
    page_size = args.page_size if args.page_size is not None else saved.page_size
    vim_mode = args.vim if args.vim is not None else saved.vim_mode
    render_config = load_render_config(args.theme, args.no_color)

    if args.save:
        if args.theme is not None:
            save_theme_name(args.theme)
        if args.no_color is not None:
            save_no_color(args.no_color)
        save_selection_defaults(SelectionDefaults(page_size=page_size, vim_mode=vim_mode))

    if not sys.stdin.isatty():
        raise SystemExit("termsurvey needs an interactive terminal.")

    session = PromptSession.open(render_config)
    try:
        answers = ask(build_demo_questions(page_size, vim_mode), {}, session=session)
    except InterruptError:
        sys.stderr.write("interrupted\n")
        raise SystemExit(130)
    except SurveyError as exc:
        raise SystemExit(str(exc))
    sys.stdout.write(json.dumps(answers, indent=2) + "\n")


if __name__ == "__main__":
    main()
