"""Report API."""

from code_health.web.app import create_app

__all__ = ["create_app"]
