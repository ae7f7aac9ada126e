"""Forecast window and weather-feature constants."""

# Days of forecast the weather provider can serve; longer requests are clamped.
MAX_FORECAST_DAYS: int = 16
DEFAULT_FORECAST_DAYS: int = 7

# Hours of past weather pulled in front of the forecast horizon.
LOOKBACK_HOURS: int = 72

# Hourly precipitation (mm) that counts as a rain event.
RAIN_THRESHOLD_MM: float = 0.5

# Returned by hours-since-rain when no rain event is in the window.
NO_RAIN_SENTINEL: int = 999

# Number of most recent hours used for the pressure trend.
PRESSURE_TREND_HOURS: int = 24

# Taxa kept per forecast day.
TOP_N_TAXA: int = 5
