"""Style terminal text with rich markup.

Every function is pure: it takes a style token and some text and returns something \
printable, leaving printing to the caller.
"""

from enum import Enum

from rich.markup import escape
from rich.rule import Rule


class Style(Enum):
    Error = "color(196)"
    Notice = "color(208)"
    Warning = "color(214)"
    Success = "color(46)"
    Info = "color(27)"
    Accent = "color(51)"
    Cleanup = "color(105)"
    Highlight = "color(45)"
    Detail = "color(87)"


def styled(style: Style, text: str) -> str:
    """Wrap `text` in rich markup for `style`, escaping any markup it contains."""
    return f"[{style.value}]{escape(text)}[/]"


def rule(style: Style, title: str = "") -> Rule:
    return Rule(escape(title), style=style.value)
