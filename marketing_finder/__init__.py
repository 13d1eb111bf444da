"""Marketing Head Finder: find a company's marketing leader via SerpAPI."""

__version__ = "0.1.0"
