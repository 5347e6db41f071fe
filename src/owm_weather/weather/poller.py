"""Background polling engine and the consumer facade built on top of it."""

import asyncio
import logging
import queue
import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import timedelta
from enum import Enum
from typing import Optional, Union

import httpx

from owm_weather.config import AWAIT_POLL_DELAY_SECONDS
from owm_weather.weather.client import OwmWeatherClient
from owm_weather.weather.location import (
    LocationSpec, PollConfig, Units,
    build_request_url, classify_location
)
from owm_weather.weather.outcome import (
    Failure, FetchResult, Loading, UpdateOutcome
)

logger = logging.getLogger(__name__)


class PollerState(str, Enum):
    """Lifecycle of a polling engine."""
    STARTING = "starting"
    POLLING = "polling"
    STOPPED = "stopped"


class WeatherPoller:
    """Runs the request loop on a daemon thread and publishes outcomes to a channel.

    The poller is the only writer of its channel. Once a stop has been
    requested every further emission is dropped, and the interval wait is
    interrupted so the thread exits promptly.
    """

    def __init__(
        self,
        url: str,
        poll_interval: timedelta,
        channel: "queue.SimpleQueue[UpdateOutcome]",
        client: Optional[OwmWeatherClient] = None,
        name: str = "owm-weather-poller"
    ):
        """Initialize the poller.

        Args:
            url: Request URL, fixed for the lifetime of the poller
            poll_interval: Wait between iterations, zero stops after one update
            channel: Outbound queue of outcomes
            client: Weather client (creates default if None); closed on exit
            name: Name of the worker thread
        """
        self.url = url
        self.poll_interval = poll_interval
        self.state = PollerState.STARTING
        self._channel = channel
        self._client = client or OwmWeatherClient()
        self._stop_event = threading.Event()
        self._thread = threading.Thread(target=self._run, name=name, daemon=True)

    @property
    def is_running(self) -> bool:
        return self.state != PollerState.STOPPED

    def start(self) -> "WeatherPoller":
        """Emit the loading placeholder and start the worker thread."""
        self._emit(Loading())
        self._thread.start()
        return self

    def stop(self):
        """Request termination. Outcomes produced after this call are discarded."""
        self._stop_event.set()

    def join(self, timeout: Optional[float] = None) -> bool:
        """Wait for the worker thread to exit.

        Returns:
            True if the thread has exited
        """
        self._thread.join(timeout)
        return not self._thread.is_alive()

    def _emit(self, outcome: UpdateOutcome):
        if self._stop_event.is_set():
            logger.debug(f"Session closed, dropping {outcome.kind} outcome")
            return
        self._channel.put(outcome)

    def _run(self):
        self.state = PollerState.POLLING
        interval = self.poll_interval.total_seconds()
        try:
            while not self._stop_event.is_set():
                self._emit(self._poll_once())

                if interval == 0:
                    break
                if self._stop_event.wait(interval):
                    break
        finally:
            self.state = PollerState.STOPPED
            self._client.close()
            logger.debug("Weather poller stopped")

    def _poll_once(self) -> FetchResult:
        try:
            return self._client.fetch(self.url)
        except httpx.TransportError as e:
            logger.warning(f"Transport error contacting OpenWeatherMap: {e!r}")
            return Failure(reason=f"transport error: {e}")
        except httpx.RequestError as e:
            logger.warning(f"Request to OpenWeatherMap failed: {e!r}")
            return Failure(reason=f"request error: {e}")
        except Exception as e:
            logger.exception(f"Unexpected error polling OpenWeatherMap: {e}")
            return Failure(reason=f"unexpected error: {e}")


class WeatherSession:
    """Consumer handle of one polling session."""

    def __init__(
        self,
        location: LocationSpec,
        config: PollConfig,
        client: Optional[OwmWeatherClient] = None
    ):
        """Initialize the session. Call start() to begin polling.

        Args:
            location: Classified location
            config: Poll settings
            client: Weather client handed to the poller (creates default if None)
        """
        self.location = location
        self.config = config
        self._channel: "queue.SimpleQueue[UpdateOutcome]" = queue.SimpleQueue()
        self._poller = WeatherPoller(
            build_request_url(location, config),
            config.poll_interval,
            self._channel,
            client=client
        )

    @property
    def is_running(self) -> bool:
        return self._poller.is_running

    @property
    def state(self) -> PollerState:
        return self._poller.state

    def start(self) -> "WeatherSession":
        logger.info(
            f"Starting weather session for {self.location!r}, "
            f"units={self.config.units.value}, lang={self.config.lang}, "
            f"interval={self.config.poll_interval}"
        )
        self._poller.start()
        return self

    def poll(self) -> Optional[UpdateOutcome]:
        """Return the next queued outcome, or None if there is nothing new."""
        try:
            return self._channel.get_nowait()
        except queue.Empty:
            return None

    def close(self):
        """Stop the poller. Outcomes already queued can still be polled."""
        self._poller.stop()

    def join(self, timeout: Optional[float] = None) -> bool:
        return self._poller.join(timeout)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def _as_interval(poll_interval: Union[timedelta, float]) -> timedelta:
    if isinstance(poll_interval, timedelta):
        return poll_interval
    return timedelta(minutes=poll_interval)


def start_session(
    location: str,
    units: Union[Units, str],
    lang: str,
    api_key: str,
    poll_interval: Union[timedelta, float],
    *,
    client: Optional[OwmWeatherClient] = None
) -> WeatherSession:
    """Start polling current weather in the background.

    Args:
        location: City id, "<lat>,<lon>" pair or city name
        units: standard, metric or imperial
        lang: Language code for condition descriptions
        api_key: OpenWeatherMap API key
        poll_interval: timedelta, or minutes as a number; zero for a single update
        client: Optional weather client, owned and closed by the session

    Returns:
        Running session; its first outcome is always Loading

    Raises:
        ValidationError: If units or poll_interval are invalid
    """
    config = PollConfig(
        units=units,
        lang=lang,
        api_key=api_key,
        poll_interval=_as_interval(poll_interval)
    )
    return WeatherSession(classify_location(location), config, client=client).start()


async def await_first(
    location: str,
    units: Union[Units, str],
    lang: str,
    api_key: str,
    *,
    poll_delay: float = AWAIT_POLL_DELAY_SECONDS,
    client: Optional[OwmWeatherClient] = None
) -> FetchResult:
    """Fetch current weather once.

    Starts a single update session and polls it, yielding to the event loop
    for poll_delay seconds whenever nothing is queued.

    Returns:
        The first Success or Failure; never Loading
    """
    with start_session(location, units, lang, api_key, timedelta(0), client=client) as session:
        while True:
            outcome = session.poll()
            if outcome is None:
                await asyncio.sleep(poll_delay)
            elif not isinstance(outcome, Loading):
                return outcome


def weather(
    location: str,
    units: Union[Units, str],
    lang: str,
    api_key: str,
    *,
    poll_delay: float = AWAIT_POLL_DELAY_SECONDS,
    client: Optional[OwmWeatherClient] = None
) -> FetchResult:
    """Blocking variant of await_first().

    The wait runs on a dedicated worker thread with its own event loop, so
    this may also be called from code that already runs an event loop.
    """
    with ThreadPoolExecutor(max_workers=1, thread_name_prefix="owm-weather") as pool:
        future = pool.submit(
            asyncio.run,
            await_first(location, units, lang, api_key, poll_delay=poll_delay, client=client)
        )
        return future.result()
