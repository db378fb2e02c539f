"""Route registry: endpoint metadata, the registry list and the route generator."""

from src.presentation.routers.api.v1.routes.metadata import HTTPMethod, RouteMetadata

__all__ = [
    "HTTPMethod",
    "RouteMetadata",
]
