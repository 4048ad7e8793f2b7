# tests/test_quality_scorer.py
"""
Unit tests for article quality heuristics.
"""

from ntrl_reader.services.quality_scorer import (
    ArticleQuality,
    calculate_quality,
    count_sentences,
    cta_density,
    has_repeated_phrases,
    score_text_block,
)

CTA_SENTENCE = "Share this story and subscribe to our newsletter. "


class TestCountSentences:
    def test_terminators_followed_by_space_or_end(self):
        assert count_sentences("One. Two! Three? Four") == 3

    def test_runs_count_once(self):
        assert count_sentences("Wait... what?!") == 2

    def test_decimal_point_is_not_a_sentence(self):
        assert count_sentences("Version 3.5 shipped") == 0

    def test_empty(self):
        assert count_sentences("") == 0


class TestCalculateQuality:
    """ok_for_summary thresholds."""

    def test_good_article(self, article_text):
        quality = calculate_quality(article_text)

        assert quality.char_count == len(article_text)
        assert quality.sentence_count == 12
        assert quality.ok_for_summary is True

    def test_too_short(self):
        quality = calculate_quality("The council met on Tuesday. It approved the budget.")
        assert quality.sentence_count == 2
        assert quality.ok_for_summary is False

    def test_long_but_few_sentences(self, article_sentences):
        # One huge run-on sentence
        text = " ".join(s.rstrip(".") for s in article_sentences) + "."
        quality = calculate_quality(text)
        assert quality.char_count >= 900
        assert quality.sentence_count == 1
        assert quality.ok_for_summary is False

    def test_cta_heavy(self, article_text):
        text = article_text + " " + CTA_SENTENCE * 5
        quality = calculate_quality(text)

        assert quality.char_count >= 900
        assert quality.sentence_count >= 8
        assert quality.ok_for_summary is False

    def test_empty_and_none(self):
        assert calculate_quality("") == ArticleQuality(0, 0, False)
        assert calculate_quality(None) == ArticleQuality(0, 0, False)

    def test_pure(self, article_text):
        assert calculate_quality(article_text) == calculate_quality(article_text)

    def test_to_dict(self):
        assert calculate_quality("").to_dict() == {
            "char_count": 0,
            "sentence_count": 0,
            "ok_for_summary": False,
        }


class TestCtaDensity:
    def test_clean_article(self, article_text):
        assert cta_density(article_text) == 0

    def test_cta_text(self):
        # share, subscribe, newsletter over 8 words
        assert cta_density(CTA_SENTENCE.strip()) == 3 / 8


class TestRepeatedPhrases:
    def test_repeated_trigram(self):
        assert has_repeated_phrases("the same three words " * 5) is True

    def test_short_text_ignored(self):
        assert has_repeated_phrases("go team go team go team go") is False

    def test_normal_article(self, article_text):
        assert has_repeated_phrases(article_text) is False


class TestScoreTextBlock:
    def test_empty_block(self):
        # Both short-text penalties, nothing else
        assert score_text_block("") == -50

    def test_article_beats_navigation(self, article_text):
        nav = "Menu Subscribe Sign up Log in"
        assert score_text_block(article_text) > 50
        assert score_text_block(nav) < 0
        assert score_text_block(article_text) > score_text_block(nav)

    def test_spam_penalized(self, article_text):
        spam = article_text + " " + "buy cheap tickets " * 6
        plain = article_text + " " + "the council met again after the vote to review it"
        assert score_text_block(spam) < score_text_block(plain)
