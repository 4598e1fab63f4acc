from __future__ import annotations

import threading
import time
from typing import Any, Callable, Mapping

from launchpad.errors import QuotePayloadError
from launchpad.integrations.fmp_rest import sanitize_url
from launchpad.schemas.quote import TickerRow, TickerState


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def change_percentage(quote: Mapping[str, Any]) -> float:
    """Signed day change in percent, derived from whatever fields the quote carries."""
    pct = quote.get("changesPercentage")
    if _is_number(pct):
        return float(pct)

    change = quote.get("change")
    price = quote.get("price")
    if _is_number(change) and _is_number(price) and price != 0:
        return (change / price) * 100
    return 0.0


def direction(percentage: float) -> str:
    return "up" if percentage >= 0 else "down"


def loop_sequence(quotes: list[Any]) -> list[Any]:
    """The quote list followed by itself, so a marquee can wrap without a seam."""
    return quotes + quotes


def ticker_row(quote: Mapping[str, Any]) -> TickerRow:
    pct = change_percentage(quote)
    price = quote.get("price")
    sign = "+" if pct >= 0 else ""
    return TickerRow(
        symbol=str(quote.get("symbol") or ""),
        price_text=f"{price:.2f}" if _is_number(price) else "—",
        percentage=pct,
        percentage_text=f"{sign}{pct:.2f}%",
        direction=direction(pct),
    )


class QuotePoller:
    """Fixed-interval batched quote refresh with a stale-response guard.

    Ticks keep a fixed cadence and each fetch runs on its own worker thread.
    A tick that finds a fetch of the same generation still in flight is
    skipped, so a hung provider holds at most one worker per generation.
    Responses that arrive after ``stop()`` (or after the symbol set
    changed) are discarded.
    """

    def __init__(
        self,
        *,
        client,
        symbols: list[str] | tuple[str, ...],
        interval_sec: float = 60.0,
        thread_factory: Callable[..., threading.Thread] = threading.Thread,
    ) -> None:
        self.client = client
        self.interval_sec = interval_sec
        self._symbols: tuple[str, ...] = tuple(symbols)
        self._thread_factory = thread_factory

        self._lock = threading.Lock()
        self._quotes: list[Any] = []
        self._loading = True
        self._active = False
        self._generation = 0
        self._stop_event = threading.Event()
        self._scheduler: threading.Thread | None = None

        self.poll_cycles = 0
        self.successful_polls = 0
        self.failed_polls = 0
        self.discarded_responses = 0
        self.skipped_ticks = 0
        self._in_flight: set[int] = set()
        self.last_poll_ts: int | None = None
        self.last_error: str | None = None

    @property
    def symbols(self) -> tuple[str, ...]:
        return self._symbols

    @property
    def active(self) -> bool:
        return self._active

    @property
    def quotes(self) -> list[Any]:
        with self._lock:
            return list(self._quotes)

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def loop_quotes(self) -> list[Any]:
        return loop_sequence(self.quotes)

    def start(self) -> None:
        """Activate: reset the view, fetch now, then again on every tick."""
        with self._lock:
            if self._active:
                return
            self._generation += 1
            generation = self._generation
            self._active = True
            self._quotes = []
            self._loading = True
            self._stop_event = threading.Event()
            stop_event = self._stop_event

        scheduler = self._thread_factory(
            target=self._run_schedule,
            args=(generation, stop_event),
            daemon=True,
            name="quote-poller",
        )
        self._scheduler = scheduler
        print(
            f"[TICKER][poller_start] symbols={','.join(self._symbols)} "
            f"interval_sec={self.interval_sec} generation={generation}",
            flush=True,
        )
        scheduler.start()

    def stop(self, join_timeout: float | None = 1.0) -> None:
        with self._lock:
            if not self._active:
                return
            self._active = False
            self._generation += 1
            self._stop_event.set()
        scheduler = self._scheduler
        self._scheduler = None
        if (
            scheduler is not None
            and join_timeout is not None
            and scheduler is not threading.current_thread()
            and scheduler.is_alive()
        ):
            scheduler.join(timeout=join_timeout)
        print("[TICKER][poller_stop] thread=quote-poller", flush=True)

    def set_symbols(self, symbols: list[str] | tuple[str, ...]) -> None:
        """Swap the symbol set; an active poller restarts under a new generation."""
        new_symbols = tuple(symbols)
        if new_symbols == self._symbols:
            return
        was_active = self._active
        self.stop()
        self._symbols = new_symbols
        if was_active:
            self.start()

    def _run_schedule(self, generation: int, stop_event: threading.Event) -> None:
        self._spawn_fetch(generation)
        while not stop_event.wait(self.interval_sec):
            self._spawn_fetch(generation)

    def _spawn_fetch(self, generation: int) -> bool:
        with self._lock:
            if generation in self._in_flight:
                self.skipped_ticks += 1
                skip = True
            else:
                self._in_flight.add(generation)
                skip = False
        if skip:
            print(f"[TICKER][tick_skipped] reason=fetch_in_flight generation={generation}", flush=True)
            return False

        worker = self._thread_factory(
            target=self._fetch_in_worker,
            args=(generation,),
            daemon=True,
            name=f"quote-fetch-{generation}",
        )
        worker.start()
        return True

    def _fetch_in_worker(self, generation: int) -> None:
        try:
            self.poll_once(generation)
        finally:
            with self._lock:
                self._in_flight.discard(generation)

    def _is_current(self, generation: int) -> bool:
        return self._active and generation == self._generation

    def poll_once(self, generation: int | None = None) -> bool:
        """Run one batched fetch; returns whether the result was applied."""
        with self._lock:
            if generation is None:
                generation = self._generation
            if not self._is_current(generation):
                return False
            self.poll_cycles += 1
            symbols = self._symbols

        quotes: list[Any] = []
        error: str | None = None
        try:
            payload = self.client.get_quotes(symbols)
            if not isinstance(payload, list):
                raise QuotePayloadError(f"expected list payload, got {type(payload).__name__}")
            quotes = payload
        except Exception as exc:
            error = sanitize_url(str(exc))

        with self._lock:
            if not self._is_current(generation):
                self.discarded_responses += 1
                print(f"[TICKER][response_discarded] generation={generation}", flush=True)
                return False
            self._quotes = quotes
            self._loading = False
            self.last_poll_ts = int(time.time())
            self.last_error = error
            if error is None:
                self.successful_polls += 1
            else:
                self.failed_polls += 1

        if error is None:
            print(f"[TICKER][poll_ok] count={len(quotes)} generation={generation}", flush=True)
        else:
            print(f"[TICKER][poll_failed] error={error} generation={generation}", flush=True)
        return True

    def snapshot(self) -> TickerState:
        with self._lock:
            quotes = list(self._quotes)
            loading = self._loading
        loop = loop_sequence(quotes)
        return TickerState(
            symbols=list(self._symbols),
            quotes=quotes,
            loop_quotes=loop,
            loading=loading,
            rows=[ticker_row(q) for q in loop if isinstance(q, Mapping)],
        )

    def metrics(self) -> dict[str, Any]:
        return {
            "active": self._active,
            "generation": self._generation,
            "poll_cycles": self.poll_cycles,
            "successful_polls": self.successful_polls,
            "failed_polls": self.failed_polls,
            "discarded_responses": self.discarded_responses,
            "skipped_ticks": self.skipped_ticks,
            "in_flight": len(self._in_flight),
            "last_poll_ts": self.last_poll_ts,
            "last_error": self.last_error,
        }
