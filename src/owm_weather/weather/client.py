"""HTTP client for the OpenWeatherMap current weather API."""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from owm_weather.config import REQUEST_TIMEOUT_SECONDS, USER_AGENT
from owm_weather.weather.location import redact_url
from owm_weather.weather.models import CurrentWeather
from owm_weather.weather.outcome import Failure, FetchResult, Success

logger = logging.getLogger(__name__)

# httpx logs every request URL at INFO, and ours carry the API key
_HTTP_LOGGERS = ("httpx", "httpcore")


class RedactApiKeyFilter(logging.Filter):
    """Mask the appid query parameter in log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = redact_url(message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


_redact_filter = RedactApiKeyFilter()


def install_redaction():
    """Attach the API key filter to the HTTP library loggers, once."""
    for logger_name in _HTTP_LOGGERS:
        http_logger = logging.getLogger(logger_name)
        if _redact_filter not in http_logger.filters:
            http_logger.addFilter(_redact_filter)


class OwmWeatherClient:
    """Blocking client for fetching current weather from OpenWeatherMap."""

    def __init__(
        self,
        user_agent: str = USER_AGENT,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
        transport: Optional[httpx.BaseTransport] = None
    ):
        """Initialize the weather client.

        Args:
            user_agent: User-Agent header for API requests
            timeout: Request timeout in seconds
            transport: Optional httpx transport, e.g. a MockTransport in tests
        """
        install_redaction()
        self.user_agent = user_agent
        self.client = httpx.Client(
            headers={"User-Agent": self.user_agent},
            timeout=timeout,
            transport=transport
        )

    def fetch(self, url: str) -> FetchResult:
        """Perform one GET request and classify the response.

        Args:
            url: Fully built request URL

        Returns:
            Success with the decoded report for HTTP 200 with a valid body,
            Failure with the status line or parser message otherwise

        Raises:
            httpx.TransportError: If the provider could not be reached
            httpx.RequestError: For other request failures, e.g. too many redirects
        """
        logger.debug(f"Requesting {redact_url(url)}")
        response = self.client.get(url)

        if response.status_code != httpx.codes.OK:
            reason = f"{response.status_code} {response.reason_phrase}".strip()
            logger.warning(f"OpenWeatherMap returned {reason}")
            return Failure(reason=reason)

        try:
            report = CurrentWeather.model_validate_json(response.content)
        except ValidationError as e:
            logger.error(f"Invalid API response format: {e}")
            return Failure(reason=str(e))

        logger.info(f"Fetched current weather for {report.name} (id={report.id})")
        return Success(report=report)

    def close(self):
        """Close the HTTP client."""
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
