# tests/test_html_extractor.py
"""
Unit tests for main-content extraction from article HTML.
"""

import pytest

from ntrl_reader.services.html_extractor import (
    CandidateSource,
    ExtractionCandidate,
    collect_candidates,
    extract_main_text,
    extract_title,
    select_best_candidate,
)


@pytest.fixture
def paragraphs_html(article_sentences):
    """Article paragraphs with no surrounding container."""
    return "".join(f"<p>{s}</p>\n" for s in article_sentences)


class TestExtractMainText:
    """End-to-end extraction on realistic pages."""

    def test_article_block_wins(self, article_html):
        text = extract_main_text(article_html)

        assert text.startswith("Transit budget approved The city council approved")
        assert "The mayor is expected to sign the budget" in text
        assert len(text) >= 600

    def test_scripts_styles_and_chrome_removed(self, article_html):
        text = extract_main_text(article_html)

        assert "tracking" not in text
        assert "color" not in text
        assert "Home" not in text
        assert "Privacy policy" not in text

    def test_entities_decoded(self):
        html = (
            "<article><p>Smith &amp; Sons said the mayor&#39;s office &#x2014; not the council &mdash; "
            "approved the contract after a long review of competing bids on Monday.</p></article>"
        )
        assert extract_main_text(html) == (
            "Smith & Sons said the mayor's office — not the council — "
            "approved the contract after a long review of competing bids on Monday."
        )

    def test_malformed_entities_never_raise(self, article_text):
        html = f"<article>{article_text} &#55357; &#{'1' * 5000}; end.</article>"
        text = extract_main_text(html)

        assert text.startswith("The city council approved")
        assert "\ud83d" not in text
        text.encode("utf-8")

    def test_main_block(self, paragraphs_html):
        text = extract_main_text(f"<html><body><main>{paragraphs_html}</main></body></html>")
        assert "The city council approved" in text
        # Tag strategies flatten to one line
        assert "\n" not in text

    def test_class_container(self, paragraphs_html):
        html = f'<html><body><div class="story-body">{paragraphs_html}</div></body></html>'
        text = extract_main_text(html)
        assert "The city council approved" in text
        assert "\n" not in text

    def test_paragraph_fallback(self, paragraphs_html):
        html = f"<html><body>{paragraphs_html}<p>Advertisement</p></body></html>"
        text = extract_main_text(html)

        assert "Advertisement" not in text
        # Combined paragraphs keep one line each
        assert text.count("\n") == 11

    def test_nothing_usable(self):
        assert extract_main_text("<html><body><p>Hi</p></body></html>") == ""

    def test_empty_input(self):
        assert extract_main_text("") == ""
        assert extract_main_text(None) == ""


class TestCandidates:
    def test_strategies_collected_in_order(self, article_html):
        sources = [c.source for c in collect_candidates(article_html)]
        assert sources == [CandidateSource.ARTICLE, CandidateSource.PARAGRAPHS]

    def test_article_beats_main_with_chrome(self, paragraphs_html):
        html = (
            "<main><div>Menu Subscribe Sign up Log in Navigation Cookie settings</div>"
            f"<article>{paragraphs_html}</article></main>"
        )
        candidates = collect_candidates(html)
        best = select_best_candidate(candidates)

        assert best.source == CandidateSource.ARTICLE
        assert "Menu" not in best.text

    def test_short_blocks_skipped(self):
        html = "<article><p>Short body.</p></article>"
        assert collect_candidates(html) == []

    def test_select_highest_score(self):
        candidates = [
            ExtractionCandidate(text="a", score=5, source=CandidateSource.ARTICLE),
            ExtractionCandidate(text="b", score=9, source=CandidateSource.MAIN),
        ]
        assert select_best_candidate(candidates).text == "b"

    def test_ties_keep_strategy_order(self):
        candidates = [
            ExtractionCandidate(text="a", score=10, source=CandidateSource.ARTICLE),
            ExtractionCandidate(text="b", score=10, source=CandidateSource.MAIN),
        ]
        assert select_best_candidate(candidates).text == "a"

    def test_select_from_nothing(self):
        assert select_best_candidate([]) is None


class TestExtractTitle:
    def test_og_title_preferred(self):
        html = (
            "<html><head><title>Site | Page</title>"
            '<meta property="og:title" content="Budget &amp; Transit"></head></html>'
        )
        assert extract_title(html) == "Budget & Transit"

    def test_title_tag(self, article_html):
        assert extract_title(article_html) == "Transit budget approved"

    def test_h1_fallback(self):
        assert extract_title('<body><h1 class="headline"> Council votes </h1></body>') == "Council votes"

    def test_no_title(self):
        assert extract_title("<body><p>No heading here</p></body>") is None

    def test_empty_input(self):
        assert extract_title(None) is None
        assert extract_title("") is None
