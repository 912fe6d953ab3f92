# Cmdtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Color palettes and the rich theme used by the Cmdtree console.

Every color attribute declared on a palette class automatically gets a bold
variant with a `_b` suffix (e.g. `OneColors.DARK_RED_b`), generated by
`ColorsMeta`. Values are plain rich style strings, so they can be used in
console markup: `console.print(f"[{OneColors.DARK_RED}]error[/]")`.
"""
from rich.style import Style
from rich.theme import Theme


class ColorsMeta(type):
    """Adds a bold `_b` variant for every uppercase color attribute."""

    def __new__(mcs, name, bases, namespace):
        bold_variants = {
            f"{key}_b": f"bold {value}"
            for key, value in namespace.items()
            if key.isupper() and isinstance(value, str)
        }
        namespace.update(bold_variants)
        return super().__new__(mcs, name, bases, namespace)


class OneColors(metaclass=ColorsMeta):
    """Atom One Dark palette."""

    BLACK = "#282C34"
    GUTTER_GREY = "#4B5263"
    COMMENT_GREY = "#5C6370"
    WHITE = "#ABB2BF"
    DARK_RED = "#BE5046"
    LIGHT_RED = "#E06C75"
    DARK_YELLOW = "#D19A66"
    LIGHT_YELLOW = "#E5C07B"
    GREEN = "#98C379"
    CYAN = "#56B6C2"
    BLUE = "#61AFEF"
    MAGENTA = "#C678DD"


class NordColors(metaclass=ColorsMeta):
    """Nord palette, grouped as polar night, snow storm, frost and aurora."""

    NORD0 = "#2E3440"
    NORD1 = "#3B4252"
    NORD3 = "#4C566A"
    NORD4 = "#D8DEE9"
    NORD6 = "#ECEFF4"
    NORD7 = "#8FBCBB"
    NORD8 = "#88C0D0"
    NORD9 = "#81A1C1"
    NORD10 = "#5E81AC"
    NORD11 = "#BF616A"
    NORD12 = "#D08770"
    NORD13 = "#EBCB8B"
    NORD14 = "#A3BE8C"
    NORD15 = "#B48EAD"


def get_nord_theme() -> Theme:
    """Return a rich Theme mapping semantic style names to the Nord palette."""
    return Theme(
        {
            "title": Style(color=NordColors.NORD8, bold=True),
            "heading": Style(color=NordColors.NORD9, bold=True),
            "command": Style(color=NordColors.NORD7, bold=True),
            "option": Style(color=NordColors.NORD8),
            "argument": Style(color=NordColors.NORD15),
            "required": Style(color=NordColors.NORD11, bold=True),
            "default": Style(color=NordColors.NORD3, italic=True),
            "info": Style(color=NordColors.NORD10),
            "warning": Style(color=NordColors.NORD13),
            "error": Style(color=NordColors.NORD11, bold=True),
            "success": Style(color=NordColors.NORD14),
            "muted": Style(color=NordColors.NORD3),
        }
    )
