from __future__ import annotations

from html import escape
from urllib.parse import urlsplit

from launchpad.schemas.headline import Headline
from launchpad.schemas.quote import TickerState
from launchpad.schemas.snippet import Snippet
from launchpad.services.headline_resolver import FALLBACK_HEADLINE

_STYLE = """
:root { --bg: #0b0f17; --muted: #6b7280; --text: #e5e7eb; --accent: #60a5fa;
        --accent-2: #34d399; --ring: #1f2937; }
* { box-sizing: border-box; }
body { margin: 0; background: var(--bg); color: var(--text);
       font-family: Inter, system-ui, -apple-system, Segoe UI, Roboto, Arial, sans-serif; }
a { color: var(--accent); text-decoration: none; }
a:hover { color: var(--accent-2); text-decoration: underline; }
.wrap { max-width: 1200px; margin: 0 auto; padding: 40px 24px 80px; }
.header { display: flex; align-items: center; justify-content: space-between; margin-bottom: 40px; }
h1 { font-size: 28px; margin: 0; font-weight: 900; }
.tag, .muted { color: var(--muted); }
.small { font-size: 13px; }
.chip { margin-left: 8px; border: 1px solid var(--ring); padding: 3px 10px; border-radius: 999px;
        font-size: 12px; text-transform: uppercase; color: var(--muted); }
.pill { border: 1px solid var(--ring); border-radius: 999px; padding: 10px 16px; color: var(--accent); }
.grid { display: grid; gap: 28px; grid-template-columns: repeat(12, 1fr); }
.card { border: 1px solid var(--ring); border-radius: 18px; padding: 28px 24px; }
.news { grid-column: span 7; } .ticker { grid-column: span 5; }
.nugget, .history { grid-column: span 6; }
.section-title { font-size: 15px; font-weight: 700; color: var(--accent); text-transform: uppercase;
                 letter-spacing: 1.5px; margin: 0 0 14px; }
.headline { font-size: 26px; line-height: 1.2; margin: 6px 0 12px; font-weight: 800; }
.desc { color: var(--muted); font-size: 16px; }
.ticker-track { overflow: hidden; white-space: nowrap; border: 1px dashed var(--ring);
                border-radius: 12px; padding: 14px; background: #111827; }
.scroll { display: inline-block; animation: scroll 22s linear infinite; }
@keyframes scroll { from { transform: translateX(0); } to { transform: translateX(-50%); } }
.row { display: inline-flex; align-items: baseline; gap: 8px; margin-right: 12px; }
.price-up { color: var(--accent-2); font-weight: 700; }
.price-down { color: #f87171; font-weight: 700; }
pre { overflow-x: auto; background: #111827; border-radius: 10px; padding: 12px; }
footer { margin-top: 36px; color: var(--muted); text-align: center; }
@media (max-width: 980px) { .news, .ticker, .nugget, .history { grid-column: span 12; } }
"""

_TICKER_SCRIPT = """
(function () {
  var track = document.getElementById("ticker-scroll");
  function esc(s) {
    return String(s).replace(/[&<>"']/g, function (c) {
      return {"&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&quot;", "'": "&#39;"}[c];
    });
  }
  function render(state) {
    if (state.loading) { track.innerHTML = '<span class="muted">Loading quotes…</span>'; return; }
    track.innerHTML = state.rows.map(function (r) {
      return '<span class="row"><strong>' + esc(r.symbol) + '</strong> <span class="price-' +
        r.direction + '">' + esc(r.price_text) + ' (' + esc(r.percentage_text) +
        ')</span><span class="dot">•</span></span>';
    }).join("");
  }
  function refresh() {
    fetch("/v1/ticker").then(function (res) { return res.json(); }).then(render)
      .catch(function () { render({loading: false, rows: []}); });
  }
  setInterval(refresh, %(interval_ms)d);
})();
"""


def safe_href(url: str) -> str:
    """Only http(s) links from third-party sources make it into an href."""
    if urlsplit(url.strip()).scheme.lower() in ("http", "https"):
        return url
    return FALLBACK_HEADLINE.url


def render_ticker_track(ticker: TickerState) -> str:
    if ticker.loading:
        return '<span class="muted">Loading quotes…</span>'
    return "".join(
        '<span class="row">'
        f"<strong>{escape(row.symbol)}</strong> "
        f'<span class="price-{row.direction}">{escape(row.price_text)} ({escape(row.percentage_text)})</span>'
        '<span class="dot">•</span>'
        "</span>"
        for row in ticker.rows
    )


def _render_snippet(snippet: Snippet) -> str:
    code = ""
    if snippet.code:
        code = f'<pre aria-label="code example"><code>{escape(snippet.code)}</code></pre>'
    return (
        f'<article class="card {snippet.kind}">'
        f'<div class="section-title">{escape(snippet.section_title)}</div>'
        f'<h3 class="headline">{escape(snippet.heading)}</h3>'
        f'<p class="desc">{escape(snippet.body)} '
        f'<a href="{escape(snippet.link_url)}" target="_blank" rel="noreferrer">{escape(snippet.link_text)}</a></p>'
        f"{code}"
        "</article>"
    )


def render_launchpad_page(
    *,
    headline: Headline,
    ticker: TickerState,
    snippets: tuple[Snippet, ...],
    year: int,
    refresh_interval_sec: float = 60.0,
) -> str:
    summary = f'<p class="desc">{escape(headline.summary)}</p>' if headline.summary else ""
    script = _TICKER_SCRIPT % {"interval_ms": int(refresh_interval_sec * 1000)}
    return (
        "<!DOCTYPE html>"
        '<html lang="en"><head><meta charset="utf-8">'
        '<meta name="viewport" content="width=device-width, initial-scale=1">'
        "<title>Software Vocation — Launchpad</title>"
        f"<style>{_STYLE}</style></head><body>"
        '<main class="wrap">'
        '<header class="header"><div class="brand">'
        "<h1>Software Vocation — Launchpad</h1>"
        '<div class="tag">A daily starting point for budding engineers</div>'
        '</div><div class="pill">v1</div></header>'
        '<section class="grid">'
        '<article class="card news">'
        '<div class="section-title">Tech News (TLDR)</div>'
        f'<h2 class="headline"><a href="{escape(safe_href(headline.url))}" target="_blank" rel="noreferrer">'
        f"{escape(headline.title)}</a></h2>"
        f"{summary}"
        '<p class="muted small">Source: <a href="https://tldr.tech/" target="_blank" rel="noreferrer">tldr.tech</a> '
        f'<span class="chip">{escape(headline.source)}</span></p>'
        "</article>"
        '<aside class="card ticker">'
        '<div class="section-title">Market Ticker</div>'
        '<div class="ticker-track" role="marquee" aria-label="Live stock prices scrolling">'
        f'<div class="scroll" id="ticker-scroll">{render_ticker_track(ticker)}</div>'
        "</div>"
        '<p class="muted small">Demo data from FinancialModelingPrep (refreshes every minute).</p>'
        "</aside>"
        f"{''.join(_render_snippet(s) for s in snippets)}"
        "</section>"
        f'<footer><span class="muted">© {year} Software Vocation. '
        "Data belongs to respective sources.</span></footer>"
        "</main>"
        f"<script>{script}</script>"
        "</body></html>"
    )
