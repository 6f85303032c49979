"""Data set copy use case."""

from __future__ import annotations

import logging
from typing import Any

from quicksight_object_copier.configuration import ConfigurationError
from quicksight_object_copier.remote_access import (
    QuickSightApiError,
    RefreshLookupStatus,
    RemoteError,
)

from ._steps import copy_present_members, open_gateway, run_step
from .copy_contracts import (
    CopyExecutionError,
    CopyOutcome,
    CopyRequest,
    CopyStep,
    GatewayFactory,
    ObjectType,
    PlannedWrite,
)

_LOGGER = logging.getLogger(__name__)

COPIED_DATA_SET_MEMBERS = (
    "ImportMode",
    "PhysicalTableMap",
    "LogicalTableMap",
    "ColumnGroups",
    "FieldFolders",
    "RowLevelPermissionDataSet",
    "RowLevelPermissionTagConfiguration",
    "ColumnLevelPermissionRules",
    "DataSetUsageConfiguration",
    "DatasetParameters",
)


def copy_data_set(
    request: CopyRequest,
    *,
    gateway_factory: GatewayFactory | None = None,
) -> CopyOutcome:
    """Re-create the source data set under the destination id.

    The data set is created first; refresh properties, when the source has them,
    are applied afterwards in a separate call. A failure of that last call leaves
    the new data set in place without refresh properties.
    """
    gateway = open_gateway(request, gateway_factory)
    account_id = request.context.account_id
    source_id = request.source_id
    destination_id = request.destination_id

    data_set = run_step(
        CopyStep.DESCRIBE_DATA_SET,
        lambda: gateway.describe_data_set(account_id, source_id),
    )
    permissions = run_step(
        CopyStep.DESCRIBE_DATA_SET_PERMISSIONS,
        lambda: gateway.describe_data_set_permissions(account_id, source_id),
    )
    lookup = run_step(
        CopyStep.DESCRIBE_DATA_SET_REFRESH_PROPERTIES,
        lambda: gateway.describe_data_set_refresh_properties(account_id, source_id),
    )
    if lookup.status is RefreshLookupStatus.FAILED:
        cause = lookup.error or RemoteError("DescribeDataSetRefreshProperties", "lookup failed")
        raise CopyExecutionError(CopyStep.DESCRIBE_DATA_SET_REFRESH_PROPERTIES, cause) from cause

    create_parameters: dict[str, Any] = {
        "AwsAccountId": account_id,
        "DataSetId": destination_id,
        "Name": destination_id,
        **copy_present_members(data_set, COPIED_DATA_SET_MEMBERS),
    }
    if permissions:
        create_parameters["Permissions"] = permissions
    writes = [PlannedWrite(operation="CreateDataSet", parameters=create_parameters)]

    refresh_properties = lookup.properties if lookup.status is RefreshLookupStatus.FOUND else None
    if refresh_properties is not None:
        writes.append(
            PlannedWrite(
                operation="PutDataSetRefreshProperties",
                parameters={
                    "AwsAccountId": account_id,
                    "DataSetId": destination_id,
                    "DataSetRefreshProperties": refresh_properties,
                },
            )
        )

    if request.dry_run:
        _LOGGER.info("Dry run: skipping %d write(s) for %s", len(writes), destination_id)
        return _outcome(request, arn=None, writes=tuple(writes))

    response = run_step(
        CopyStep.CREATE_DATA_SET, lambda: gateway.create_data_set(**create_parameters)
    )
    _LOGGER.info("Created data set %s from %s", destination_id, source_id)

    if refresh_properties is not None:
        try:
            gateway.put_data_set_refresh_properties(account_id, destination_id, refresh_properties)
        except (ConfigurationError, QuickSightApiError) as exc:
            raise CopyExecutionError(
                CopyStep.PUT_DATA_SET_REFRESH_PROPERTIES,
                exc,
                note=f"data set {destination_id} was created without refresh properties",
            ) from exc
        _LOGGER.info("Applied refresh properties to data set %s", destination_id)

    return _outcome(request, arn=response.get("Arn"), writes=tuple(writes))


def _outcome(
    request: CopyRequest, *, arn: str | None, writes: tuple[PlannedWrite, ...]
) -> CopyOutcome:
    return CopyOutcome(
        object_type=ObjectType.DATA_SET,
        source_id=request.source_id,
        destination_id=request.destination_id,
        destination_arn=arn,
        writes=writes,
        dry_run=request.dry_run,
    )
