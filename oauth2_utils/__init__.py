"""Stateless helpers for OAuth2 clients: request URLs, parameter checks and JWTs."""
from oauth2_utils.core import *  # noqa: F401,F403
from oauth2_utils.core import __all__

__version__ = "0.1.0"
