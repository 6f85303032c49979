"""Step helpers shared by the copy workflows."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from quicksight_object_copier.configuration import ConfigurationError
from quicksight_object_copier.remote_access import (
    QuickSightApiError,
    QuickSightGateway,
    create_quicksight_gateway,
)

from .copy_contracts import CopyExecutionError, CopyRequest, CopyStep, GatewayFactory

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


def run_step(step: CopyStep, action: Callable[[], T]) -> T:
    """Run one step, converting its failure into a step-identifying error."""
    _LOGGER.info("Step: %s", step.value)
    try:
        return action()
    except (ConfigurationError, QuickSightApiError) as exc:
        raise CopyExecutionError(step, exc) from exc


def open_gateway(request: CopyRequest, gateway_factory: GatewayFactory | None) -> QuickSightGateway:
    resolved_factory = gateway_factory or create_quicksight_gateway
    return run_step(CopyStep.RESOLVE_CONTEXT, lambda: resolved_factory(request.context))


def copy_present_members(
    source: Mapping[str, Any], member_names: tuple[str, ...]
) -> dict[str, Any]:
    """Pick the named members present in a describe response, values untouched."""
    return {name: source[name] for name in member_names if source.get(name) is not None}
