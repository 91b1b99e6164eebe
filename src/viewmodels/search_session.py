from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable
from enum import Enum

from src.api.errors import WeatherApiError
from src.api.weather_client import search_places
from src.api.weather_models import PlaceCandidate
from src.config import SEARCH_DEBOUNCE_S, SEARCH_MIN_CHARS

logger = logging.getLogger("weathernow")

SearchFn = Callable[[str], Iterable[PlaceCandidate]]
TimerFactory = Callable[[float, Callable[[], None]], threading.Timer]


class SearchState(str, Enum):
    IDLE = "idle"
    DEBOUNCING = "debouncing"
    IN_FLIGHT = "in_flight"
    RESOLVED = "resolved"
    STALE = "stale"
    FAILED = "failed"


class Debouncer:
    """Ajastin, joka käynnistyy uudelleen jokaisesta trigger()-kutsusta.

    Vain viimeisen tauon jälkeen callback ajetaan (timerin omassa säikeessä).
    """

    def __init__(self, delay_s: float = SEARCH_DEBOUNCE_S, timer_factory: TimerFactory = threading.Timer):
        self.delay_s = delay_s
        self._timer_factory = timer_factory
        self._timer: threading.Timer | None = None
        self._lock = threading.Lock()

    def trigger(self, fn: Callable[[], None]) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()

            def _fire() -> None:
                with self._lock:
                    # peruttu tai korvattu uudella ajastimella
                    if self._timer is not timer:
                        return
                    self._timer = None
                fn()

            timer = self._timer_factory(self.delay_s, _fire)
            timer.daemon = True
            self._timer = timer
            timer.start()

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    @property
    def pending(self) -> bool:
        return self._timer is not None


class SearchSession:
    """
    Paikkahaun tilakone: IDLE → DEBOUNCING → IN_FLIGHT → RESOLVED / STALE / FAILED.

    Jokainen haku saa kasvavan tokenin. Vastaus hyväksytään vain, jos sen token on
    edelleen viimeisin annettu; hitaampi vanha vastaus ei siis voi ylikirjoittaa
    uudempaa. Vanhoja pyyntöjä ei keskeytetä, niiden tulos vain ohitetaan.
    """

    def __init__(
        self,
        search_fn: SearchFn = search_places,
        debouncer: Debouncer | None = None,
        min_chars: int = SEARCH_MIN_CHARS,
    ):
        self._search_fn = search_fn
        self._debouncer = debouncer or Debouncer()
        self._min_chars = min_chars
        self._lock = threading.RLock()
        self._token = 0

        self.query: str = ""
        self.suggestions: tuple[PlaceCandidate, ...] = ()
        self.show_suggestions: bool = False
        self.state: SearchState = SearchState.IDLE

    @property
    def token(self) -> int:
        return self._token

    @property
    def visible_suggestions(self) -> tuple[PlaceCandidate, ...]:
        return self.suggestions if self.show_suggestions else ()

    # --- syöte ----------------------------------------------------------------

    def set_query(self, text: str) -> None:
        """Uusi syöte: nollaa debounce-ikkunan."""
        with self._lock:
            self.query = text
            self.state = SearchState.DEBOUNCING
            self._debouncer.trigger(self._on_debounce_expired)

    def _on_debounce_expired(self) -> None:
        with self._lock:
            text = self.query
            token = self.begin_lookup()
        if token is not None:
            self.run_lookup(token, text)

    def begin_lookup(self) -> int | None:
        """Debounce-ikkuna päättyi. Palauttaa uuden tokenin tai None, jos hakua ei tehdä."""
        with self._lock:
            self._debouncer.cancel()
            if len(self.query) < self._min_chars:
                self._hide_and_clear()
                self.state = SearchState.IDLE
                return None
            self._token += 1
            self.state = SearchState.IN_FLIGHT
            return self._token

    def run_lookup(self, token: int, text: str) -> SearchState:
        try:
            results = list(self._search_fn(text))
        except WeatherApiError as e:
            return self.fail(token, e)
        return self.resolve(token, results)

    # --- vastaukset -----------------------------------------------------------

    def resolve(self, token: int, results: Iterable[PlaceCandidate]) -> SearchState:
        with self._lock:
            if token != self._token:
                logger.debug("search: discarded stale response (token %s, current %s)", token, self._token)
                return SearchState.STALE
            self.suggestions = tuple(results)
            self.show_suggestions = True
            if not self._debouncer.pending:
                self.state = SearchState.RESOLVED
            return SearchState.RESOLVED

    def fail(self, token: int, error: Exception) -> SearchState:
        with self._lock:
            if token != self._token:
                return SearchState.STALE
            logger.warning("Search failed: %s", error)
            self._hide_and_clear()
            self.state = SearchState.FAILED
            return SearchState.FAILED

    # --- valinta ja näkyvyys ---------------------------------------------------

    def select(self, candidate: PlaceCandidate) -> str:
        """Käyttäjä valitsi ehdotuksen. Palauttaa haettavan sijainnin 'Nimi, Maa'."""
        with self._lock:
            self._debouncer.cancel()
            self._token += 1  # mahdollinen käynnissä oleva haku vanhenee
            self.query = candidate.query
            self.show_suggestions = False
            self.state = SearchState.IDLE
            return candidate.query

    def clear(self) -> None:
        with self._lock:
            self._debouncer.cancel()
            self._token += 1
            self.query = ""
            self._hide_and_clear()
            self.state = SearchState.IDLE

    def collapse(self) -> None:
        """Piilota ehdotuslista (esim. klikkaus listan ulkopuolelle). Hakuteksti säilyy."""
        with self._lock:
            self.show_suggestions = False

    def expand(self) -> None:
        with self._lock:
            self.show_suggestions = bool(self.suggestions)

    def close(self) -> None:
        """Näkymän purku: peru odottava ajastin."""
        self._debouncer.cancel()

    def _hide_and_clear(self) -> None:
        # lista korvataan aina kokonaan, ei muokata paikallaan
        self.suggestions = ()
        self.show_suggestions = False
