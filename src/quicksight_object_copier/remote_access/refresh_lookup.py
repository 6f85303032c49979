"""Refresh properties lookup outcomes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .api_errors import QuickSightApiError


class RefreshLookupStatus(str, Enum):
    """Outcome of describing a data set's refresh properties."""

    FOUND = "found"
    ABSENT = "absent"
    FAILED = "failed"


@dataclass(frozen=True)
class RefreshPropertiesLookup:
    """Result of one DescribeDataSetRefreshProperties call."""

    status: RefreshLookupStatus
    properties: Mapping[str, Any] | None
    error: QuickSightApiError | None

    @staticmethod
    def found(properties: Mapping[str, Any]) -> RefreshPropertiesLookup:
        return RefreshPropertiesLookup(
            status=RefreshLookupStatus.FOUND,
            properties=properties,
            error=None,
        )

    @staticmethod
    def absent() -> RefreshPropertiesLookup:
        return RefreshPropertiesLookup(
            status=RefreshLookupStatus.ABSENT,
            properties=None,
            error=None,
        )

    @staticmethod
    def failed(error: QuickSightApiError) -> RefreshPropertiesLookup:
        return RefreshPropertiesLookup(
            status=RefreshLookupStatus.FAILED,
            properties=None,
            error=error,
        )
