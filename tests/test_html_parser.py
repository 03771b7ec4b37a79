import pytest

from webparser.html_parser import HtmlParseError, extract_details, extract_links

BASE = "https://example.com"
TITLE_CLASS = "dod_new-event__title js-dod-new-event-title"


def _title_div(text, cls=TITLE_CLASS):
    return f'<div class="{cls}">{text}</div>'


def test_links_are_prefixed_in_document_order():
    html = '<html><body><a href="/a">x</a><div><p><a href="/b">y</a></p></div></body></html>'
    assert extract_links(html, BASE) == [BASE + "/a", BASE + "/b"]


def test_anchor_without_href_is_ignored():
    html = '<html><body><a name="top">x</a><a href="/c">y</a></body></html>'
    assert extract_links(html, BASE) == [BASE + "/c"]


def test_no_links_gives_empty_list():
    assert extract_links("<html><body><p>text</p></body></html>", BASE) == []


@pytest.mark.parametrize("html", ["", "   \n"])
def test_empty_document_raises(html):
    with pytest.raises(HtmlParseError):
        extract_links(html, BASE)
    with pytest.raises(HtmlParseError):
        extract_details(html, BASE)


def test_title_is_trimmed_to_first_line():
    html = "<html><body>" + _title_div("\n    Python meetup\n  ") + "</body></html>"
    assert extract_details(html, BASE) == ["Python meetup"]


def test_only_first_line_of_title_is_kept():
    html = _title_div("\n  First line\n  second line\n")
    assert extract_details(html, BASE) == ["First line"]


def test_class_match_allows_extra_classes():
    html = _title_div("\n Talk\n", cls=f"extra {TITLE_CLASS} more")
    assert extract_details(html, BASE) == ["Talk"]


def test_partial_class_does_not_match():
    html = _title_div("\n Talk\n", cls="dod_new-event__title")
    assert extract_details(html, BASE) == []


def test_blank_title_gives_empty_string():
    assert extract_details(_title_div("   \n  "), BASE) == [""]


def test_empty_title_div_is_skipped():
    assert extract_details("<html><body>" + _title_div("") + "</body></html>", BASE) == []


def test_title_starting_with_element_is_skipped():
    html = _title_div("<span>inner</span>")
    assert extract_details(html, BASE) == []


def test_titles_keep_document_order_and_unicode():
    html = (
        "<html><body>"
        + _title_div("\n  Вебинар\n")
        + "<section>"
        + _title_div("\n\tWorkshop\n")
        + "</section></body></html>"
    )
    assert extract_details(html, BASE) == ["Вебинар", "Workshop"]


def test_unindented_title_starts_after_first_blank():
    assert extract_details(_title_div("Hello world"), BASE) == ["world"]