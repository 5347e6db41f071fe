"""Command line entry point for the OpenWeatherMap polling client."""

import argparse
import logging
import sys
from typing import List, Optional

from owm_weather.config import (
    DEBUG, OWM_API_KEY, OWM_LANG, OWM_LOCATION, OWM_UNITS, POLL_MINUTES
)
from owm_weather.logging_config import configure_logging
from owm_weather.weather.location import Units
from owm_weather.weather.outcome import Failure, Loading, Success, UpdateOutcome
from owm_weather.weather.poller import start_session, weather

logger = logging.getLogger(__name__)


def non_negative_minutes(value: str) -> float:
    minutes = float(value)
    if minutes < 0:
        raise argparse.ArgumentTypeError(f"interval must not be negative, got {value}")
    return minutes


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="owm-weather",
        description="Poll current weather from OpenWeatherMap"
    )
    parser.add_argument("--location", default=OWM_LOCATION,
                        help="City id, 'lat,lon' pair or city name (default: %(default)s)")
    parser.add_argument("--units", default=OWM_UNITS, choices=[u.value for u in Units])
    parser.add_argument("--lang", default=OWM_LANG)
    parser.add_argument("--api-key", default=OWM_API_KEY,
                        help="OpenWeatherMap API key (default: $OWM_API_KEY)")
    parser.add_argument("--interval", type=non_negative_minutes, default=POLL_MINUTES,
                        help="Minutes between updates, 0 for a single update (default: %(default)s)")
    parser.add_argument("--debug", action="store_true", default=DEBUG)
    return parser.parse_args(argv)


def describe(outcome: UpdateOutcome) -> str:
    """Render an outcome as a single log line."""
    if isinstance(outcome, Loading):
        return outcome.message
    if isinstance(outcome, Failure):
        return f"update failed: {outcome.reason}"

    report = outcome.report
    conditions = ", ".join(w.description for w in report.weather) or "n/a"
    return (
        f"{report.name}: {report.main.temp} (feels like {report.main.feels_like}), "
        f"{conditions}, humidity {report.main.humidity}%, wind {report.wind.speed}"
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    args = parse_args(argv)
    configure_logging(logging.DEBUG if args.debug else logging.INFO)

    if not args.api_key:
        logger.error("No API key given, set OWM_API_KEY or pass --api-key")
        return 2

    if args.interval == 0:
        result = weather(args.location, args.units, args.lang, args.api_key)
        logger.info(describe(result))
        return 0 if isinstance(result, Success) else 1

    session = start_session(args.location, args.units, args.lang, args.api_key, args.interval)
    try:
        while session.is_running:
            outcome = session.poll()
            if outcome is None:
                # poll() never waits, so block on the worker instead of spinning
                session.join(timeout=1.0)
                continue
            logger.info(describe(outcome))
    except KeyboardInterrupt:
        logger.info("Interrupted, stopping weather session")
    finally:
        session.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
