"""
Domain services.
"""

from .client_stats_service import ClientStats, ClientStatsService

__all__ = [
    "ClientStats",
    "ClientStatsService",
]
