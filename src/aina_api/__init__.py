"""aina_api — FastAPI service behind the Waimanalo public-information dashboard."""

__version__ = "0.1.0"
