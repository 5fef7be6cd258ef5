"""Tests for OutlineExtractor."""

from __future__ import annotations

from bs4 import BeautifulSoup

from aiblog.models.outline import HeadingEntry, HeadingLevel, OutlineState
from aiblog.outline.extractor import OutlineExtractor

ARTICLE = """
<div class="blog-content">
  <h2>Introduction</h2>
  <p>Text</p>
  <h2>What is Tailwind CSS?</h2>
  <h3>Key Features</h3>
  <h4>Not included</h4>
</div>
"""


def test_extracts_sections_and_subsections_in_order() -> None:
    outline, _ = OutlineExtractor().extract_html(ARTICLE)

    assert outline.entries == [
        HeadingEntry(text="Introduction", id="introduction", level=HeadingLevel.SECTION),
        HeadingEntry(text="What is Tailwind CSS?", id="what-is-tailwind-css", level=HeadingLevel.SECTION),
        HeadingEntry(text="Key Features", id="key-features", level=HeadingLevel.SUBSECTION),
    ]
    assert outline.state is OutlineState.POPULATED


def test_assigns_ids_back_onto_headings() -> None:
    """Derived ids must be written to the elements so #anchors resolve."""

    _, html = OutlineExtractor().extract_html(ARTICLE)
    soup = BeautifulSoup(html, "lxml")

    assert soup.find("h2", id="introduction") is not None
    assert soup.find("h3", id="key-features") is not None
    assert soup.find("h4").get("id") is None


def test_fragment_input_returns_fragment() -> None:
    _, html = OutlineExtractor().extract_html(ARTICLE)
    assert "<html" not in html
    assert "<body" not in html
    assert html.strip().startswith('<div class="blog-content">')


def test_reuses_existing_ids() -> None:
    html = '<div class="blog-content"><h2 id="custom">Introduction</h2><h3>Details</h3></div>'
    outline, _ = OutlineExtractor().extract_html(html)
    assert outline.ids == ["custom", "details"]


def test_derived_id_does_not_shadow_author_id() -> None:
    """An author-supplied id later in the document is reserved before deriving."""

    html = (
        '<div class="blog-content">'
        "<h2>Setup</h2>"
        '<h2 id="setup">Installing</h2>'
        "</div>"
    )
    outline, _ = OutlineExtractor().extract_html(html)
    assert outline.ids == ["setup-1", "setup"]


def test_duplicate_headings_get_unique_ids() -> None:
    html = '<div class="blog-content"><h2>A</h2><h3>Examples</h3><h2>B</h2><h3>Examples</h3></div>'
    outline, _ = OutlineExtractor().extract_html(html)
    assert outline.ids == ["a", "examples", "b", "examples-1"]
    assert len(set(outline.ids)) == len(outline)


def test_duplicates_kept_when_dedupe_disabled() -> None:
    html = '<div class="blog-content"><h3>Examples</h3><h3>Examples</h3></div>'
    outline, _ = OutlineExtractor(dedupe=False).extract_html(html)
    assert outline.ids == ["examples", "examples"]


def test_idempotent_on_annotated_document() -> None:
    extractor = OutlineExtractor()
    first, annotated = extractor.extract_html(ARTICLE)
    second, annotated_again = extractor.extract_html(annotated)

    assert first.entries == second.entries
    assert annotated == annotated_again


def test_missing_content_region_yields_empty_outline() -> None:
    outline, _ = OutlineExtractor().extract_html("<main><h2>Outside</h2></main>", document_id="doc")
    assert outline.is_empty
    assert outline.state is OutlineState.EMPTY
    assert outline.document_id == "doc"


def test_headings_outside_region_are_ignored() -> None:
    html = '<h2>Page title</h2><div class="blog-content"><h2>Inside</h2></div>'
    outline, _ = OutlineExtractor().extract_html(html)
    assert outline.ids == ["inside"]


def test_no_headings_yields_empty_outline() -> None:
    outline, _ = OutlineExtractor().extract_html('<div class="blog-content"><p>Only text</p></div>')
    assert outline.is_empty


def test_heading_text_includes_nested_markup() -> None:
    html = '<div class="blog-content"><h2>Using <code>next/link</code>\n  today</h2></div>'
    outline, _ = OutlineExtractor().extract_html(html)
    assert outline.entries[0].text == "Using next/link today"
    assert outline.entries[0].id == "using-next-link-today"


def test_custom_selector_and_full_document() -> None:
    html = "<html><body><article id='post'><h2>One</h2></article></body></html>"
    outline, annotated = OutlineExtractor("#post").extract_html(html)
    assert outline.ids == ["one"]
    assert annotated.startswith("<html>")


def test_extract_from_parsed_tree_mutates_in_place() -> None:
    soup = BeautifulSoup(ARTICLE, "lxml")
    outline = OutlineExtractor().extract(soup, document_id="x")
    assert len(outline) == 3
    assert soup.find("h2")["id"] == "introduction"


def test_derived_id_avoids_ids_of_other_elements() -> None:
    """A derived id must not reuse an id already carried by a non-heading element."""

    html = '<div class="blog-content"><div id="key-features">x</div><h2>Key Features</h2></div>'
    outline, annotated = OutlineExtractor().extract_html(html)
    soup = BeautifulSoup(annotated, "lxml")

    assert outline.ids == ["key-features-1"]
    assert len(soup.select("#key-features")) == 1
    assert soup.select_one("#key-features-1").name == "h2"


def test_ids_outside_region_are_reserved() -> None:
    html = '<nav id="intro"></nav><div class="blog-content"><h2>Intro</h2></div>'
    outline, _ = OutlineExtractor().extract_html(html)
    assert outline.ids == ["intro-1"]


def test_repeated_author_ids_are_suffixed() -> None:
    """The first heading keeps a repeated author id; later ones are renamed and written back."""

    html = '<div class="blog-content"><h2 id="x">One</h2><h2 id="x">Two</h2><h3>X</h3></div>'
    outline, annotated = OutlineExtractor().extract_html(html)
    soup = BeautifulSoup(annotated, "lxml")

    assert outline.ids == ["x", "x-1", "x-2"]
    assert soup.select_one("#x-1").get_text() == "Two"
    assert len(soup.select("#x")) == 1


def test_repeated_author_ids_kept_when_dedupe_disabled() -> None:
    html = '<div class="blog-content"><h2 id="x">One</h2><h2 id="x">Two</h2></div>'
    outline, _ = OutlineExtractor(dedupe=False).extract_html(html)
    assert outline.ids == ["x", "x"]


def test_fragment_keeps_leading_head_elements() -> None:
    """Markup that lxml moves into <head> must survive the round trip."""

    html = '<style>.a{}</style>\n<div class="blog-content"><h2>One</h2></div>'
    _, annotated = OutlineExtractor().extract_html(html)

    assert "<style>.a{}</style>" in annotated
    assert '<h2 id="one">One</h2>' in annotated
    assert annotated.index("<style>") < annotated.index('<div class="blog-content">')
    assert "<head" not in annotated
    assert "<body" not in annotated
