"""Analysis copy use case."""

from __future__ import annotations

import logging
from typing import Any

from ._steps import open_gateway, run_step
from .copy_contracts import (
    CopyOutcome,
    CopyRequest,
    CopyStep,
    GatewayFactory,
    ObjectType,
    PlannedWrite,
)

_LOGGER = logging.getLogger(__name__)


def copy_analysis(
    request: CopyRequest,
    *,
    gateway_factory: GatewayFactory | None = None,
) -> CopyOutcome:
    """Re-create the source analysis under the destination id with one CreateAnalysis call.

    The theme reference, permission set and definition are read from the source in
    that order and passed through unmodified. Any failure stops the copy before the
    create call is issued.
    """
    gateway = open_gateway(request, gateway_factory)
    account_id = request.context.account_id
    source_id = request.source_id

    analysis = run_step(
        CopyStep.DESCRIBE_ANALYSIS,
        lambda: gateway.describe_analysis(account_id, source_id),
    )
    permissions = run_step(
        CopyStep.DESCRIBE_ANALYSIS_PERMISSIONS,
        lambda: gateway.describe_analysis_permissions(account_id, source_id),
    )
    definition = run_step(
        CopyStep.DESCRIBE_ANALYSIS_DEFINITION,
        lambda: gateway.describe_analysis_definition(account_id, source_id),
    )

    parameters: dict[str, Any] = {
        "AwsAccountId": account_id,
        "AnalysisId": request.destination_id,
        "Name": request.destination_id,
    }
    if definition is not None:
        parameters["Definition"] = definition
    if permissions:
        parameters["Permissions"] = permissions
    if analysis.get("ThemeArn"):
        parameters["ThemeArn"] = analysis["ThemeArn"]
    write = PlannedWrite(operation="CreateAnalysis", parameters=parameters)

    if request.dry_run:
        _LOGGER.info("Dry run: skipping CreateAnalysis for %s", request.destination_id)
        return _outcome(request, arn=None, writes=(write,))

    response = run_step(CopyStep.CREATE_ANALYSIS, lambda: gateway.create_analysis(**parameters))
    _LOGGER.info("Created analysis %s from %s", request.destination_id, source_id)
    return _outcome(request, arn=response.get("Arn"), writes=(write,))


def _outcome(
    request: CopyRequest, *, arn: str | None, writes: tuple[PlannedWrite, ...]
) -> CopyOutcome:
    return CopyOutcome(
        object_type=ObjectType.ANALYSIS,
        source_id=request.source_id,
        destination_id=request.destination_id,
        destination_arn=arn,
        writes=writes,
        dry_run=request.dry_run,
    )
