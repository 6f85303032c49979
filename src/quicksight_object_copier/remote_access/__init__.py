"""Remote QuickSight access exports."""

from .api_errors import NotFoundError, QuickSightApiError, RemoteError
from .quicksight_gateway import (
    QuickSightClientProtocol,
    QuickSightGateway,
    create_quicksight_gateway,
)
from .refresh_lookup import RefreshLookupStatus, RefreshPropertiesLookup

__all__ = [
    "QuickSightApiError",
    "NotFoundError",
    "RemoteError",
    "QuickSightClientProtocol",
    "QuickSightGateway",
    "create_quicksight_gateway",
    "RefreshLookupStatus",
    "RefreshPropertiesLookup",
]
