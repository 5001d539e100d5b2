"""
CLI Configuration Constants

Command names, option flags, defaults and help text.
"""


class CLIDefaults:
    """Default values for CLI options."""

    VERSION = "1.0.6"
    LOCATION = 2840
    LANGUAGE = "en"
    LIMIT = 50
    EXIT_SUCCESS = 0
    EXIT_ERROR = 1
    EXIT_INTERRUPTED = 130


class CLICommands:
    """Command names."""

    VOLUME = "volume"
    RELATED = "related"
    COMPETITOR = "competitor"
    LOCATIONS = "locations"
    LANGUAGES = "languages"
    STATUS = "status"
    SET_CREDENTIALS = "set-credentials"
    SET_API_KEY = "set-api-key"
    CACHE = "cache"


class CLIOptions:
    """Option flags."""

    LOCATION = "--location"
    LOCATION_SHORT = "-l"
    LANGUAGE = "--language"
    LIMIT = "--limit"
    LIMIT_SHORT = "-n"
    JSON = "--json"
    TABLE = "--table"
    HUMAN = "--human"
    PRINT_CACHE = "--print-cache"


class CLIHelp:
    """Help text."""

    APP_NAME = "dataforseo-cli"
    APP_DESCRIPTION = "Lightweight keyword research CLI powered by DataForSEO"
    VERSION_TEXT = "dataforseo-cli {version}"

    VOLUME_KEYWORDS = "Keywords to look up"
    RELATED_SEED = "Seed keyword"
    COMPETITOR_DOMAIN = "Target domain"
    LOCATION = "Location code"
    LANGUAGE = "Language code"
    LIMIT = "Max results"
    JSON = "Output as JSON"
    TABLE = "Output as human-readable table"
    HUMAN = "Alias for --table"
    SEARCH_LOCATIONS = "Filter locations by name"
    SEARCH_LANGUAGES = "Filter languages by name"
    CREDENTIALS_PAIRS = "login=XXX password=XXX, or base64=TOKEN"
    PRINT_CACHE = "Print cached entries and exit"

    SET_CREDENTIALS_USAGE = (
        "Usage: dataforseo-cli set-credentials login=XXX password=XXX\n"
        "   or: dataforseo-cli set-credentials base64=YOUR_BASE64_TOKEN"
    )
    NO_CREDENTIALS_HINT = (
        "No API credentials found. "
        "Run: dataforseo-cli set-credentials login=XXX password=XXX"
    )


class OutputFormat:
    """Output format names."""

    TSV = "tsv"
    JSON = "json"
    TABLE = "table"
