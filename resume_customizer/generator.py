"""
HTML fragments for the results dashboard.
"""

import html
import math
from typing import List, Optional, Sequence

from .markdown import escape_angle_brackets, markdown_to_html
from .matcher import ScoreTier, score_tier

GAUGE_RADIUS = 60
GAUGE_CIRCUMFERENCE = math.pi * 2 * GAUGE_RADIUS
BRAND_COLOR = "#234E70"


def render_resume_panel(markdown_resume: str) -> str:
    """Raw Markdown block followed by the HTML preview."""
    return f"""
<h2 style="margin-top:30px;">Customized Resume (Markdown)</h2>
<pre style="background:#f9fafc;border-radius:8px;padding:14px 18px;font-size:1em;white-space:pre-wrap;word-break:break-word;color:{BRAND_COLOR};max-height:350px;overflow:auto;">{escape_angle_brackets(markdown_resume)}</pre>
<h3 style="margin-top:24px;">Resume Preview</h3>
<div style="background:#f7f7fd;border-radius:8px;padding:14px 18px;max-height:350px;overflow:auto;">
  {markdown_to_html(markdown_resume)}
</div>
"""


def render_score_gauge(score: int, tier: Optional[ScoreTier] = None) -> str:
    """Circular SVG gauge colored by the score tier."""
    tier = tier or score_tier(score)
    offset = GAUGE_CIRCUMFERENCE * (1 - score / 100)
    return f"""
<div style="margin:16px 0; text-align: center;">
  <strong style="font-size:1.15em; color:{BRAND_COLOR};letter-spacing:0.5px;">ATS Score</strong>
  <div style="margin:18px auto 6px auto; position:relative; width:140px; height:140px;">
    <svg width="140" height="140">
      <circle cx="70" cy="70" r="{GAUGE_RADIUS}" stroke="#eee" stroke-width="14" fill="none"/>
      <circle cx="70" cy="70" r="{GAUGE_RADIUS}" stroke="{tier.color}" stroke-width="14" fill="none"
        stroke-linecap="round" stroke-dasharray="{GAUGE_CIRCUMFERENCE}" stroke-dashoffset="{offset}"
        style="transition: stroke-dashoffset 1s;" transform="rotate(-90 70 70)"/>
      <text x="70" y="88" text-anchor="middle" font-size="2em" fill="{BRAND_COLOR}" font-weight="bold">{score}%</text>
    </svg>
  </div>
  <div class="score-{tier.name}" style="margin-top:8px;font-size:1em;">
    <span style="color:{tier.color};font-weight:bold;">{tier.message}</span>
  </div>
</div>
"""


def render_matched_keywords(keywords: Sequence[str]) -> str:
    if not keywords:
        return '<span style="color:gray">No matches found.</span>'
    return f'<span style="color:green">{html.escape(", ".join(str(k) for k in keywords))}</span>'


def render_missing_keywords(keywords: Sequence[str]) -> str:
    if not keywords:
        return '<span style="color:green">No skill gaps!</span>'
    return f'<span style="color:red">{html.escape(", ".join(str(k) for k in keywords))}</span>'


def render_suggestions(suggestions: List[str]) -> str:
    """Numbered suggestion cards."""
    items = []
    for idx, suggestion in enumerate(suggestions, start=1):
        items.append(
            '<li class="suggestion">'
            f'<span class="suggestion-number">{idx}</span>'
            f"<span>{html.escape(suggestion)}</span>"
            "</li>"
        )
    return f'<ul class="suggestions" style="list-style: none; padding: 0; margin: 0;">{"".join(items)}</ul>'
