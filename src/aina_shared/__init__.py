"""
aina_shared — configuration, geo helpers, constants and models for the
Waimanalo public-information dashboard.

Usage:
    from aina_shared.config import settings
    from aina_shared.db import get_supabase_client
    from aina_shared.geo import BoundingBox, haversine_km
    from aina_shared.categorize import categorize_features
    from aina_shared.models import GeographicFeature, TsunamiZone
"""

__version__ = "0.1.0"
