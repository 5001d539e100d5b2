"""
dataforseo-cli - Lightweight keyword research CLI powered by DataForSEO

Search volume, related keywords and competitor keywords from the
DataForSEO API, with a persistent seven-day cache so repeated queries
cost nothing.
"""

__version__ = "1.0.6"
