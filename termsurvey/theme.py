"""Prompt theme definitions and selection helpers.

Themes are semantic ANSI palettes built from Pygments console codes. The
plain theme carries empty codes and is what ``no_color`` resolves to.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pygments.console import codes


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by templates."""

    name: str
    reset: str
    question_icon: str
    message: str
    help: str
    hint: str
    default: str
    answer: str
    focus: str
    option: str
    marked: str
    error: str


@dataclass(frozen=True)
class Icons:
    """Glyphs drawn by the default templates."""

    question: str = "?"
    help: str = "ⓘ"
    error: str = "✘"
    select_focus: str = "❯"
    marked: str = "◉"
    unmarked: str = "◯"


DEFAULT_THEME = UITheme(
    name="default",
    reset=codes["reset"],
    question_icon=codes["bold"] + codes["brightgreen"],
    message=codes["bold"],
    help=codes["cyan"],
    hint=codes["cyan"],
    default=codes["white"],
    answer=codes["cyan"],
    focus=codes["bold"] + codes["cyan"],
    option=codes["bold"],
    marked=codes["green"],
    error=codes["red"],
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset=codes["reset"],
    question_icon=codes["bold"] + codes["brightblue"],
    message=codes["bold"],
    help=codes["brightcyan"],
    hint=codes["faint"] + codes["cyan"],
    default=codes["faint"],
    answer=codes["brightcyan"],
    focus=codes["bold"] + codes["brightblue"],
    option="",
    marked=codes["brightcyan"],
    error=codes["brightred"],
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    question_icon="",
    message="",
    help="",
    hint="",
    default="",
    answer="",
    focus="",
    option="",
    marked="",
    error="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


@dataclass(frozen=True)
class RenderConfig:
    """Per-session rendering settings handed to every template."""

    theme: UITheme = DEFAULT_THEME
    icons: Icons = field(default_factory=Icons)
    help_rune: str = "?"

    @classmethod
    def build(cls, theme_name: str | None = None, *, no_color: bool = False) -> RenderConfig:
        return cls(theme=resolve_theme(theme_name, no_color=no_color))

    @property
    def no_color(self) -> bool:
        return self.theme is PLAIN_THEME


__all__ = [
    "UITheme",
    "Icons",
    "RenderConfig",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
