from .polygonscan import PolygonScanClient, open_client

__all__ = ["PolygonScanClient", "open_client"]
