"""Exceptions raised by the Marketing Head Finder search operations."""


class MarketingFinderError(Exception):
    """Base class for all finder errors."""


class ConfigurationError(MarketingFinderError):
    """Required configuration (the SerpAPI key) is missing."""


class NetworkError(MarketingFinderError):
    """The search request failed at the transport or HTTP level."""


class ParseError(MarketingFinderError):
    """The search response body could not be parsed."""
