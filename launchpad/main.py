from __future__ import annotations

import random
from contextlib import asynccontextmanager

from fastapi import FastAPI

from launchpad.api.routes import router
from launchpad.config.settings import get_settings
from launchpad.integrations.fmp_rest import FmpQuoteClient
from launchpad.integrations.tldr_rest import TldrRestClient
from launchpad.services.headline_resolver import HeadlineResolver
from launchpad.services.quote_poller import QuotePoller


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.quote_poller.start()
    try:
        yield
    finally:
        app.state.quote_poller.stop()


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="Launchpad", version="0.1.0", lifespan=lifespan)
    app.include_router(router)

    app.state.headline_resolver = HeadlineResolver(
        client=TldrRestClient(
            base_url=settings.LAUNCHPAD_NEWS_BASE_URL,
            timeout=settings.LAUNCHPAD_HTTP_TIMEOUT_SEC,
        )
    )
    app.state.quote_poller = QuotePoller(
        client=FmpQuoteClient(
            api_key=settings.LAUNCHPAD_QUOTE_API_KEY,
            base_url=settings.LAUNCHPAD_QUOTE_BASE_URL,
            timeout=settings.LAUNCHPAD_HTTP_TIMEOUT_SEC,
        ),
        symbols=settings.LAUNCHPAD_TICKER_SYMBOLS,
        interval_sec=settings.LAUNCHPAD_QUOTE_POLL_INTERVAL_SEC,
    )
    app.state.snippet_rng = random.Random()
    return app


app = create_app()
