"""
DataForSEO API Constants

Endpoints, envelope status codes and response defaults.
"""


class APIConfig:
    """API connection defaults."""

    BASE_URL = "https://api.dataforseo.com/v3"
    TIMEOUT_SECONDS = 30
    CONTENT_TYPE = "application/json"


class APIStatus:
    """Envelope status codes."""

    OK = 20000


class Endpoints:
    """API paths relative to the base URL."""

    SEARCH_VOLUME = "/keywords_data/google_ads/search_volume/live"
    KEYWORD_DIFFICULTY = "/dataforseo_labs/google/bulk_keyword_difficulty/live"
    KEYWORD_SUGGESTIONS = "/dataforseo_labs/google/keyword_suggestions/live"
    RANKED_KEYWORDS = "/dataforseo_labs/google/ranked_keywords/live"
    LOCATIONS = "/keywords_data/google_ads/locations"
    LANGUAGES = "/keywords_data/google_ads/languages"


class ResponseDefaults:
    """Fallbacks applied when the provider omits a field."""

    COMPETITION_UNKNOWN = "UNKNOWN"
    TREND_MONTHS = 12
    LOCATIONS_LIMIT = 50
