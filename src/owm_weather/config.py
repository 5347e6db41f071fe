"""Configuration settings for the OpenWeatherMap polling client."""

import os
from typing import Final
from dotenv import load_dotenv

load_dotenv()

# API Configuration
OWM_API_BASE_URL: Final[str] = "https://api.openweathermap.org/data/2.5/weather"
USER_AGENT: Final[str] = "owm-weather/0.1"

# Credentials (never logged)
OWM_API_KEY: str = os.getenv("OWM_API_KEY", "")

# Default query
OWM_LOCATION: str = os.getenv("OWM_LOCATION", "Berlin,DE")
OWM_UNITS: str = os.getenv("OWM_UNITS", "metric")
OWM_LANG: str = os.getenv("OWM_LANG", "en")

# Polling configuration
POLL_MINUTES: float = float(os.getenv("POLL_MINUTES", "10"))  # 0 = single update
REQUEST_TIMEOUT_SECONDS: float = float(os.getenv("REQUEST_TIMEOUT_SECONDS", "30"))
AWAIT_POLL_DELAY_SECONDS: float = float(os.getenv("AWAIT_POLL_DELAY_SECONDS", "0.05"))

DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
