"""Domain errors carried by Err results."""


class WeatherError(Exception):
    """Base class for failures surfaced by the weather pipeline."""

    message = "Weather lookup failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class CityNotFoundError(WeatherError):
    message = "City not found"

    def __init__(self, city: str, message: str | None = None):
        super().__init__(message)
        self.city = city


class UpstreamFetchError(WeatherError):
    """Transport, HTTP status or payload failure talking to the provider.

    The message is deliberately generic; provider detail is only logged.
    """

    message = "City not found"


class MalformedPayloadError(UpstreamFetchError):
    message = "Upstream payload has no weather condition"
