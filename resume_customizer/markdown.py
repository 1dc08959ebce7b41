"""
Lightweight Markdown conversions for the resume preview and Word export.

These are ordered regex substitutions, not a Markdown parser. Nested or
malformed constructs are not guaranteed to render correctly; the rule order
is fixed so output stays stable.
"""

import re
from typing import List, Pattern, Tuple

Rule = Tuple[Pattern, str]

# Line start/end as the browser sees them: \r and \n both end a line,
# and "." never crosses either
BOL = r"(?<![^\r\n])"
EOL = r"(?![^\r\n])"
LINE = r"([^\r\n]*?)"

HTML_RULES: List[Rule] = [
    (re.compile(BOL + r"# " + LINE + EOL), r"<h1>\1</h1>"),
    (re.compile(BOL + r"## " + LINE + EOL), r"<h2>\1</h2>"),
    (re.compile(BOL + r"### " + LINE + EOL), r"<h3>\1</h3>"),
    (re.compile(BOL + r"\* " + LINE + EOL), r"<li>\1</li>"),
    (re.compile(r"\*\*" + LINE + r"\*\*"), r"<strong>\1</strong>"),
    (re.compile(r"\*" + LINE + r"\*"), r"<em>\1</em>"),
    (re.compile(r"\n"), "<br>"),
]

WORD_RULES: List[Rule] = [
    (re.compile(BOL + r"# " + LINE + EOL), "\\1\n" + "=" * 20 + "\n"),
    (re.compile(BOL + r"## " + LINE + EOL), "\\1\n" + "-" * 20 + "\n"),
    (re.compile(BOL + r"### " + LINE + EOL), "\\1\n"),
    (re.compile(BOL + r"\* " + LINE + EOL), "\u2022 \\1"),
    (re.compile(r"\*\*" + LINE + r"\*\*"), r"\1"),
    (re.compile(r"\*" + LINE + r"\*"), r"\1"),
]


def apply_rules(text: str, rules: List[Rule]) -> str:
    for pattern, replacement in rules:
        text = pattern.sub(replacement, text)
    return text


def markdown_to_html(md: str) -> str:
    """Convert Markdown to the preview HTML."""
    return apply_rules(md, HTML_RULES)


def markdown_to_word_text(md: str) -> str:
    """Convert Markdown to the plain text used for the .doc download.

    Headings become underlined lines and list items get a bullet glyph.
    """
    return apply_rules(md, WORD_RULES)


def escape_angle_brackets(text: str) -> str:
    # Only < and > are escaped for the raw Markdown block
    return text.replace("<", "&lt;").replace(">", "&gt;")
