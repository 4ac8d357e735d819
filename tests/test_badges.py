import pytest

from supportdesk.models import Member
from supportdesk.table.badges import (
    NEUTRAL_STYLE,
    STATUS_STYLES,
    initial,
    keyword_summary,
    member_summary,
    safe_text,
    status_badge,
    status_badge_html,
    status_label,
)


@pytest.mark.parametrize(
    "status,label",
    [
        ("pending", "Pending"),
        ("in-progress", "In progress"),
        ("completed", "Completed"),
        ("cancelled", "Cancelled"),
        ("", "Unknown"),
        (None, "Unknown"),
    ],
)
def test_status_label(status, label):
    assert status_label(status) == label


def test_known_statuses_have_distinct_styles():
    assert len({s.background for s in STATUS_STYLES.values()}) == 4
    assert status_badge("completed")[1] is STATUS_STYLES["completed"]


def test_unknown_status_is_neutral():
    label, style = status_badge("on-hold")
    assert label == "On hold"
    assert style is NEUTRAL_STYLE
    assert status_badge(["weird"])[1] is NEUTRAL_STYLE


def test_badge_html():
    html = status_badge_html("pending")
    assert "sd-badge" in html
    assert "Pending" in html
    assert STATUS_STYLES["pending"].background in html


def test_initial():
    assert initial("alice") == "A"
    assert initial("") == ""
    assert initial(None) == ""


def test_keyword_summary():
    assert keyword_summary(["a", "b"]) == "a, b"
    assert keyword_summary(["a", "b", "c", "d"]) == "a, b, c, ..."
    assert keyword_summary([]) == ""


def test_member_summary():
    members = [Member("alice"), Member("bob"), Member("carol"), Member("dave"), Member("erin")]
    assert member_summary(members) == "A alice · B bob · C carol · +2"
    assert member_summary(members[:1]) == "A alice"
    assert member_summary([]) == ""


def test_badge_html_escapes_status_text():
    html = status_badge_html("<img src=x onerror=alert(1)>")
    assert "<img" not in html
    assert "&lt;img src=x onerror=alert(1)&gt;" in html
    assert html.startswith("<span class='sd-badge'")


def test_keyword_summary_escapes_markup():
    text = keyword_summary(["</span><a href='http://evil'>click</a>", "ok"])
    assert "<a" not in text
    assert "</span>" not in text
    assert text.endswith(", ok")


def test_member_and_title_text_is_markdown_safe():
    assert safe_text("**bold** _it_") == "\\*\\*bold\\*\\* \\_it\\_"
    assert safe_text("[link](x)") == "\\[link\\](x)"
    assert safe_text(None) == ""
    assert member_summary([Member("<b>eve</b>")]) == "&lt; &lt;b&gt;eve&lt;/b&gt;"
