from rich.rule import Rule

from gocpp.formatting import Style, rule, styled


def test_styled_wraps_text_in_markup() -> None:
    assert styled(Style.Error, "boom") == "[color(196)]boom[/]"


def test_styled_escapes_markup() -> None:
    assert styled(Style.Success, "[bold]x") == "[color(46)]\\[bold]x[/]"


def test_rule_uses_style() -> None:
    result = rule(Style.Accent, "Program Output")

    assert isinstance(result, Rule)
    assert result.style == "color(51)"
