# ntrl_reader/utils/html_text.py
"""
Shared utilities for turning HTML fragments into plain text.

Handles:
- Removal of script/style/noscript blocks
- Tag stripping
- Named and numeric (decimal and hex) entity decoding
- Whitespace normalization

This is deliberately regex-based: no DOM is built, so it works on
truncated or malformed markup.
"""

import re

# Blocks whose content is never article text
_SCRIPT_BLOCK = re.compile(r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>", re.IGNORECASE)
_STYLE_BLOCK = re.compile(r"<style\b[^<]*(?:(?!</style>)<[^<]*)*</style>", re.IGNORECASE)
_NOSCRIPT_BLOCK = re.compile(r"<noscript\b[^<]*(?:(?!</noscript>)<[^<]*)*</noscript>", re.IGNORECASE)

_TAG = re.compile(r"<[^>]+>")
_WHITESPACE = re.compile(r"\s+")

# Named entities decoded in order. &amp; precedes &lt;/&gt;, so "&amp;lt;" ends up as "<".
NAMED_ENTITIES = [
    (re.compile(r"&nbsp;", re.IGNORECASE), " "),
    (re.compile(r"&amp;", re.IGNORECASE), "&"),
    (re.compile(r"&lt;", re.IGNORECASE), "<"),
    (re.compile(r"&gt;", re.IGNORECASE), ">"),
    (re.compile(r"&quot;", re.IGNORECASE), '"'),
    (re.compile(r"&apos;", re.IGNORECASE), "'"),
    (re.compile(r"&ldquo;", re.IGNORECASE), '"'),
    (re.compile(r"&rdquo;", re.IGNORECASE), '"'),
    (re.compile(r"&lsquo;", re.IGNORECASE), "'"),
    (re.compile(r"&rsquo;", re.IGNORECASE), "'"),
    (re.compile(r"&mdash;", re.IGNORECASE), "—"),
    (re.compile(r"&ndash;", re.IGNORECASE), "–"),
    (re.compile(r"&hellip;", re.IGNORECASE), "…"),
]

# Longer digit runs are never valid code points and stay undecoded
_DECIMAL_ENTITY = re.compile(r"&#(\d{1,7});")
_HEX_ENTITY = re.compile(r"&#x([0-9a-fA-F]{1,6});")

_MAX_CODE_POINT = 0x10FFFF
_SURROGATES = range(0xD800, 0xE000)


def _code_point_to_str(num: int) -> str:
    """Characters outside the valid range, and lone surrogates, are dropped."""
    if num <= 0 or num >= _MAX_CODE_POINT or num in _SURROGATES:
        return ""
    return chr(num)


def decode_numeric_entities(text: str) -> str:
    """Decode decimal (&#39;) and hex (&#x27;) character references."""
    text = _DECIMAL_ENTITY.sub(lambda m: _code_point_to_str(int(m.group(1), 10)), text)
    return _HEX_ENTITY.sub(lambda m: _code_point_to_str(int(m.group(1), 16)), text)


def decode_entities(text: str) -> str:
    """Decode the supported named entities, then numeric ones."""
    for pattern, replacement in NAMED_ENTITIES:
        text = pattern.sub(replacement, text)
    return decode_numeric_entities(text)


def remove_non_content_blocks(html: str) -> str:
    """Replace script, style and noscript blocks with a space."""
    html = _SCRIPT_BLOCK.sub(" ", html)
    html = _STYLE_BLOCK.sub(" ", html)
    return _NOSCRIPT_BLOCK.sub(" ", html)


def normalize_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def strip_html(html: str | None) -> str:
    """
    Remove HTML tags, decode entities, normalize whitespace.

    Returns a single line of text; paragraph breaks are not preserved.
    """
    if not html:
        return ""
    text = remove_non_content_blocks(html)
    text = _TAG.sub(" ", text)
    text = decode_entities(text)
    return normalize_whitespace(text)
