"""Copy workflow entities."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from quicksight_object_copier.configuration.runtime_settings import CopyContext
from quicksight_object_copier.remote_access import QuickSightGateway

GatewayFactory = Callable[[CopyContext], QuickSightGateway]


class ObjectType(str, Enum):
    """Kind of QuickSight object being copied."""

    ANALYSIS = "analysis"
    DATA_SET = "data set"


class CopyStep(str, Enum):
    """Ordered steps of the copy workflows, valued by their operator-facing description."""

    RESOLVE_CONTEXT = "resolve execution context"
    DESCRIBE_ANALYSIS = "describe analysis"
    DESCRIBE_ANALYSIS_PERMISSIONS = "describe analysis permissions"
    DESCRIBE_ANALYSIS_DEFINITION = "describe analysis definition"
    CREATE_ANALYSIS = "create analysis"
    DESCRIBE_DATA_SET = "describe data set"
    DESCRIBE_DATA_SET_PERMISSIONS = "describe data set permissions"
    DESCRIBE_DATA_SET_REFRESH_PROPERTIES = "describe data set refresh properties"
    CREATE_DATA_SET = "create data set"
    PUT_DATA_SET_REFRESH_PROPERTIES = "put data set refresh properties"


class CopyExecutionError(Exception):
    """Raised when a copy step fails; no later step has been attempted."""

    def __init__(self, step: CopyStep, cause: Exception, *, note: str | None = None) -> None:
        # Botocore validation reports span several lines; operators get one.
        cause_text = " ".join(str(cause).split())
        message = f"unable to {step.value}: {cause_text}"
        if note:
            message = f"{message} ({note})"
        super().__init__(message)
        self.step = step


@dataclass(frozen=True)
class CopyRequest:
    """Input contract for copying one object."""

    context: CopyContext
    source_id: str
    destination_id: str
    dry_run: bool = False


@dataclass(frozen=True)
class PlannedWrite:
    """One write call, issued or planned, with the exact parameters sent."""

    operation: str
    parameters: Mapping[str, Any]


@dataclass(frozen=True)
class CopyOutcome:
    """Output contract for one completed copy."""

    object_type: ObjectType
    source_id: str
    destination_id: str
    destination_arn: str | None
    writes: tuple[PlannedWrite, ...]
    dry_run: bool
