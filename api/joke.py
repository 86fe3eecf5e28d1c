"""Vercel serverless function serving a random joke."""

import os
import sys

# Add the src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from joke_api.http_adapter import JokeRequestHandler


class handler(JokeRequestHandler):
    """HTTP request handler for Vercel."""
