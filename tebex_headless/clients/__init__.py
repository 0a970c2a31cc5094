"""
HTTP clients for the Tebex Headless API.

- http.py: the shared request builder (URL, query normalization, auth, error mapping)
- headless.py: one method per endpoint, built on the request builder
"""

from .headless import TebexHeadless
from .http import BASE_URL, HeadlessHttpClient, Route, normalize_params

__all__ = ["BASE_URL", "HeadlessHttpClient", "Route", "TebexHeadless", "normalize_params"]
