# topmark:header:start
#
#   project      : CSSPlus
#   file         : test_minifier.py
#   file_relpath : tests/adapters/test_minifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the whitespace minifier."""

from __future__ import annotations

from cssplus.adapters.minifier import WhitespaceMinifier

minifier = WhitespaceMinifier()


def test_collapses_whitespace_and_last_semicolon() -> None:
    css: str = "body {\n  margin: 0;\n  color: red;\n}\n\na, b > c {\n  padding: 1px 2px;\n}\n"

    assert minifier.minify(css) == "body{margin:0;color:red}a,b>c{padding:1px 2px}"


def test_drops_comments_but_keeps_preserved_ones() -> None:
    css: str = "/*! license */\n/* note */\n.a { color: red; }"

    assert minifier.minify(css) == "/*! license */.a{color:red}"


def test_string_contents_are_untouched() -> None:
    css: str = '.a::before { content: "a  ,  b ; }"; }'

    assert minifier.minify(css) == '.a::before{content:"a  ,  b ; }"}'
