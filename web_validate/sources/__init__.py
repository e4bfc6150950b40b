"""
TLD list sources.

- bundled: the default list shipped with the package
- tld_list: fetching and parsing flat TLD lists (IANA format)
"""

from web_validate.sources.bundled import bundled_tlds
from web_validate.sources.tld_list import fetch_tld_list, parse_tld_list

__all__ = [
    "bundled_tlds",
    "fetch_tld_list",
    "parse_tld_list",
]
