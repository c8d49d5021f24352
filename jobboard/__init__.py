"""JobBoard: job posting REST API and client."""

__version__ = "1.0.0"
