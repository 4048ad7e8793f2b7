# tests/conftest.py
"""
Pytest configuration and fixtures.
"""

import pytest

# Neutral, CTA-free article: 12 sentences, well over 900 characters
ARTICLE_SENTENCES = [
    "The city council approved a new transit budget on Tuesday after three months of public hearings.",
    "The plan allocates $450 million to bus service improvements over the next five years, according to the mayor's office.",
    "Officials said the funding will add 12 new routes and extend evening service on existing lines.",
    "Council member Dana Ortiz said the vote reflected strong support from neighborhoods with limited transit access.",
    "The budget also includes money for accessibility upgrades at 40 stations across the city.",
    "A report from the transportation department found that ridership grew by 8 percent last year.",
    "Some residents raised concerns during the hearings about construction delays on major roads.",
    "The department said it would publish a construction schedule before work begins in the spring.",
    "Regional planners expect the new routes to reduce average commute times for about 90,000 people.",
    "The council will review progress on the plan at a public meeting in October.",
    "Transit advocates welcomed the decision and said they would monitor how quickly the new buses arrive.",
    "The mayor is expected to sign the budget into law by the end of the month.",
]

ARTICLE_TITLE = "Transit budget approved"


def _paragraph_html(sentences: list[str]) -> str:
    return "".join(
        "<p>" + " ".join(sentences[i:i + 3]) + "</p>\n"
        for i in range(0, len(sentences), 3)
    )


@pytest.fixture
def article_sentences() -> list[str]:
    return list(ARTICLE_SENTENCES)


@pytest.fixture
def article_text() -> str:
    """Plain-text article body."""
    return " ".join(ARTICLE_SENTENCES)


@pytest.fixture
def article_html() -> str:
    """A full page with the body inside <article> and noise around it."""
    return f"""<!DOCTYPE html>
<html>
<head>
  <title>{ARTICLE_TITLE}</title>
  <script>var tracking = "<p>ignored script paragraph</p>"; window.menu = true;</script>
  <style>.nav {{ color: red; }}</style>
</head>
<body>
  <nav><a href="/">Home</a> <a href="/world">World</a> <a href="/login">Log in</a></nav>
  <article>
    <h1>{ARTICLE_TITLE}</h1>
    {_paragraph_html(ARTICLE_SENTENCES)}
  </article>
  <footer><p>Privacy policy</p><p>Terms of service</p></footer>
</body>
</html>"""
