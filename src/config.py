"""Centralised engine settings loaded from environment / .env file."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Backload matching
    max_detour_km: float = 50.0  # default detour budget per listing
    min_detour_km: float = 10.0  # request-side lower bound
    max_detour_cap_km: float = 200.0  # request-side upper bound
    max_backload_stops: int = 3  # matched listings folded into a route

    # Fuel & duration
    fuel_price_per_liter: float = 65.0  # PHP / liter (diesel)
    savings_km_per_liter: float = 4.0  # used to price km saved by re-ordering
    avg_speed_kmh: float = 50.0

    # Efficiency scoring
    target_earnings_per_km: float = 20.0  # PHP / km net that scores 100

    # Distance memoization
    distance_cache_size: int = 4096

    # Service
    rate_limit: str = "100/minute"
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
