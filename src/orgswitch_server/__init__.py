"""Organization switch OAuth2 grant for multi-tenant identity servers."""

__version__ = "0.1.0"
