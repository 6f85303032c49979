"""Copy workflow exports."""

from .analysis_copy import copy_analysis
from .copy_contracts import (
    CopyExecutionError,
    CopyOutcome,
    CopyRequest,
    CopyStep,
    GatewayFactory,
    ObjectType,
    PlannedWrite,
)
from .data_set_copy import copy_data_set

__all__ = [
    "CopyRequest",
    "CopyOutcome",
    "CopyStep",
    "CopyExecutionError",
    "GatewayFactory",
    "ObjectType",
    "PlannedWrite",
    "copy_analysis",
    "copy_data_set",
]
