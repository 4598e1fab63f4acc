from __future__ import annotations

import random

from launchpad.schemas.snippet import Snippet

KNOWLEDGE_NUGGETS: tuple[Snippet, ...] = (
    Snippet(
        kind="nugget",
        section_title="Knowledge Nugget — JavaScript",
        heading="Closures give a function access to its outer scope",
        body=(
            "Per MDN: “A closure is the combination of a function bundled together with "
            "references to its surrounding state (the lexical environment).” They’re "
            "created every time a function is created."
        ),
        link_text="Read more on MDN →",
        link_url="https://developer.mozilla.org/en-US/docs/Web/JavaScript/Guide/Closures",
        code=(
            "function makeCounter() {\n"
            "  let n = 0;            // outer scope captured\n"
            "  return () => ++n;     // inner function closes over n\n"
            "}\n"
            "const next = makeCounter();\n"
            "next(); // 1\n"
            "next(); // 2"
        ),
    ),
    Snippet(
        kind="nugget",
        section_title="Knowledge Nugget — Python",
        heading="Generators produce values lazily",
        body=(
            "A function containing yield returns a generator. Each next() call resumes the "
            "function where it left off, so large or infinite sequences never need to be "
            "held in memory at once."
        ),
        link_text="Read more in the Python docs →",
        link_url="https://docs.python.org/3/howto/functional.html#generators",
        code=(
            "def countdown(n):\n"
            "    while n > 0:\n"
            "        yield n\n"
            "        n -= 1\n"
            "\n"
            "list(countdown(3))  # [3, 2, 1]"
        ),
    ),
    Snippet(
        kind="nugget",
        section_title="Knowledge Nugget — HTTP",
        heading="GET requests should be safe and idempotent",
        body=(
            "HTTP semantics define GET as a safe method: it must not change server state. "
            "Caches, crawlers and prefetchers all rely on this, so mutations belong in "
            "POST, PUT, PATCH or DELETE."
        ),
        link_text="Read more on MDN →",
        link_url="https://developer.mozilla.org/en-US/docs/Glossary/Safe/HTTP",
    ),
)

HISTORY_FACTS: tuple[Snippet, ...] = (
    Snippet(
        kind="history",
        section_title="Today I Learned — History",
        heading="“Software engineering” was popularized in 1968",
        body=(
            "The term gained wide adoption after the NATO Software Engineering Conference "
            "held in Garmisch, Germany (Oct 7–11, 1968). The meetings highlighted the "
            "“software crisis” and helped establish software engineering as a discipline."
        ),
        link_text="Learn more →",
        link_url="https://en.wikipedia.org/wiki/NATO_Software_Engineering_Conferences",
    ),
    Snippet(
        kind="history",
        section_title="Today I Learned — History",
        heading="The first “bug” was an actual moth",
        body=(
            "In 1947 operators of the Harvard Mark II found a moth trapped in a relay and "
            "taped it into the logbook with the note “First actual case of bug being found.”"
        ),
        link_text="Learn more →",
        link_url="https://en.wikipedia.org/wiki/Bug_(engineering)",
    ),
    Snippet(
        kind="history",
        section_title="Today I Learned — History",
        heading="Git was written in about ten days",
        body=(
            "After the Linux kernel lost access to BitKeeper in April 2005, Linus Torvalds "
            "started Git and it was hosting the kernel's own development within weeks."
        ),
        link_text="Learn more →",
        link_url="https://en.wikipedia.org/wiki/Git",
    ),
)


def pick_snippets(rng: random.Random | None = None) -> tuple[Snippet, Snippet]:
    """One knowledge nugget and one history fact for a page render."""
    chooser = rng or random
    return chooser.choice(KNOWLEDGE_NUGGETS), chooser.choice(HISTORY_FACTS)
