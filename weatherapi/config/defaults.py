"""Default upstream endpoints and cache settings."""

OPENWEATHER_BASE_URL = "http://api.openweathermap.org/data/2.5"
OPENWEATHER_GEOCODE_URL = "http://api.openweathermap.org/geo/1.0/direct"

API_KEY_ENV_VAR = "OPENWEATHER_API_KEY"

# Checked in order; the first existing file wins.
ENV_FILE_CANDIDATES = (".env", "../.env")

DEFAULT_CACHE_TTL_SECONDS = 300
