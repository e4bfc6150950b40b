"""
Constants for web_validate package.

Centralizes domain limits and TLD list defaults.
"""

# Domain limits
DEFAULT_MAX_LENGTH = 255  # Total length cap, counted in Unicode scalar values
MAX_LABELS = 128  # 127 subdomains plus the TLD
MAX_LABEL_LENGTH = 63

# TLD list sources
IANA_TLD_LIST_URL = "https://data.iana.org/TLD/tlds-alpha-by-domain.txt"
BUNDLED_SOURCE = "bundled:public-suffix-list"

# HTTP
DEFAULT_REQUEST_TIMEOUT = 30.0  # seconds
USER_AGENT = "web-validate TLD list fetcher"

# Cache
TLD_CACHE_NAMESPACE = "tlds"
DEFAULT_CACHE_TTL_DAYS = 7
