"""UI theme definitions and selection helpers.

Themes map each ``ColorClass`` to an ANSI style plus a few chrome colors for
the interactive view. The plain theme carries no escapes at all and is used
whenever color output is disabled.
"""

from __future__ import annotations

from dataclasses import dataclass

from .classify import ColorClass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    status: str
    tree_marker: str
    symlink: str
    setuid_file: str
    setgid_file: str
    sticky_directory: str
    directory: str
    special_device: str
    special_socket: str
    world_writable: str
    executable: str
    archive: str
    image: str
    media: str
    plain: str

    def color_for(self, color_class: ColorClass) -> str:
        """Return the escape prefix for ``color_class``."""
        return getattr(self, color_class.value)

    def paint(self, text: str, color_class: ColorClass) -> str:
        """Wrap ``text`` in the style for ``color_class`` when it has one."""
        color = self.color_for(color_class)
        if not color:
            return text
        return f"{color}{text}{self.reset}"


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    status="\033[2m",
    tree_marker="\033[38;5;44m",
    symlink="\033[36m",
    setuid_file="\033[37;41m",
    setgid_file="\033[30;43m",
    sticky_directory="\033[37;44m",
    directory="\033[1;34m",
    special_device="\033[1;33;40m",
    special_socket="\033[1;35m",
    world_writable="\033[33m",
    executable="\033[32m",
    archive="\033[1;31m",
    image="\033[35m",
    media="\033[38;5;172m",
    plain="",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    status="\033[2;38;5;110m",
    tree_marker="\033[38;5;39m",
    symlink="\033[38;5;51m",
    setuid_file="\033[1;38;5;231;48;5;160m",
    setgid_file="\033[1;38;5;16;48;5;214m",
    sticky_directory="\033[1;38;5;231;48;5;25m",
    directory="\033[1;38;5;45m",
    special_device="\033[38;5;227m",
    special_socket="\033[38;5;177m",
    world_writable="\033[38;5;215m",
    executable="\033[38;5;84m",
    archive="\033[38;5;203m",
    image="\033[38;5;141m",
    media="\033[38;5;117m",
    plain="\033[38;5;252m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    status="",
    tree_marker="",
    symlink="",
    setuid_file="",
    setgid_file="",
    sticky_directory="",
    directory="",
    special_device="",
    special_socket="",
    world_writable="",
    executable="",
    archive="",
    image="",
    media="",
    plain="",
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


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
