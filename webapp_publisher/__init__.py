"""webapp-publisher: stage build output and push it to a web app host over HTTP."""

__version__ = "1.0.0"
