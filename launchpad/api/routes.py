from datetime import datetime

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from launchpad.api.page import render_launchpad_page
from launchpad.services.snippets import pick_snippets

router = APIRouter()


@router.get('/', response_class=HTMLResponse)
def launchpad_page(request: Request):
    state = request.app.state
    headline = state.headline_resolver.resolve()
    page = render_launchpad_page(
        headline=headline,
        ticker=state.quote_poller.snapshot(),
        snippets=pick_snippets(state.snippet_rng),
        year=datetime.now().year,
        refresh_interval_sec=state.quote_poller.interval_sec,
    )
    return HTMLResponse(page)


@router.get('/v1/headline')
def get_headline(request: Request):
    return request.app.state.headline_resolver.resolve().model_dump()


@router.get('/v1/ticker')
def get_ticker(request: Request):
    return request.app.state.quote_poller.snapshot().model_dump()


@router.get('/v1/metrics/ticker')
def ticker_metrics(request: Request):
    return request.app.state.quote_poller.metrics()


@router.get('/healthz')
def healthz():
    return {'status': 'ok'}
