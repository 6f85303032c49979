"""QuickSight API gateway over a boto3 client."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol

import boto3
from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    NoCredentialsError,
    PartialCredentialsError,
)

from quicksight_object_copier.configuration import ConfigurationError, CopyContext

from .api_errors import RESOURCE_NOT_FOUND_CODE, NotFoundError, QuickSightApiError, RemoteError
from .refresh_lookup import RefreshPropertiesLookup

_LOGGER = logging.getLogger(__name__)


class QuickSightClientProtocol(Protocol):
    """Subset of the boto3 QuickSight client used by the gateway."""

    def describe_analysis(self, **kwargs: Any) -> Mapping[str, Any]: ...

    def describe_analysis_permissions(self, **kwargs: Any) -> Mapping[str, Any]: ...

    def describe_analysis_definition(self, **kwargs: Any) -> Mapping[str, Any]: ...

    def create_analysis(self, **kwargs: Any) -> Mapping[str, Any]: ...

    def describe_data_set(self, **kwargs: Any) -> Mapping[str, Any]: ...

    def describe_data_set_permissions(self, **kwargs: Any) -> Mapping[str, Any]: ...

    def describe_data_set_refresh_properties(self, **kwargs: Any) -> Mapping[str, Any]: ...

    def create_data_set(self, **kwargs: Any) -> Mapping[str, Any]: ...

    def put_data_set_refresh_properties(self, **kwargs: Any) -> Mapping[str, Any]: ...


class QuickSightGateway:
    """Issues QuickSight API calls and translates botocore failures into domain errors."""

    def __init__(self, client: QuickSightClientProtocol) -> None:
        self._client = client

    def describe_analysis(self, account_id: str, analysis_id: str) -> Mapping[str, Any]:
        response = self._invoke(
            "DescribeAnalysis",
            self._client.describe_analysis,
            AwsAccountId=account_id,
            AnalysisId=analysis_id,
        )
        return response.get("Analysis") or {}

    def describe_analysis_permissions(self, account_id: str, analysis_id: str) -> list[Any]:
        response = self._invoke(
            "DescribeAnalysisPermissions",
            self._client.describe_analysis_permissions,
            AwsAccountId=account_id,
            AnalysisId=analysis_id,
        )
        return response.get("Permissions") or []

    def describe_analysis_definition(
        self, account_id: str, analysis_id: str
    ) -> Mapping[str, Any] | None:
        response = self._invoke(
            "DescribeAnalysisDefinition",
            self._client.describe_analysis_definition,
            AwsAccountId=account_id,
            AnalysisId=analysis_id,
        )
        return response.get("Definition")

    def create_analysis(self, **parameters: Any) -> Mapping[str, Any]:
        return self._invoke("CreateAnalysis", self._client.create_analysis, **parameters)

    def describe_data_set(self, account_id: str, data_set_id: str) -> Mapping[str, Any]:
        response = self._invoke(
            "DescribeDataSet",
            self._client.describe_data_set,
            AwsAccountId=account_id,
            DataSetId=data_set_id,
        )
        return response.get("DataSet") or {}

    def describe_data_set_permissions(self, account_id: str, data_set_id: str) -> list[Any]:
        response = self._invoke(
            "DescribeDataSetPermissions",
            self._client.describe_data_set_permissions,
            AwsAccountId=account_id,
            DataSetId=data_set_id,
        )
        return response.get("Permissions") or []

    def describe_data_set_refresh_properties(
        self, account_id: str, data_set_id: str
    ) -> RefreshPropertiesLookup:
        """Describe refresh properties, reporting "never configured" as an absent outcome."""
        try:
            response = self._invoke(
                "DescribeDataSetRefreshProperties",
                self._client.describe_data_set_refresh_properties,
                AwsAccountId=account_id,
                DataSetId=data_set_id,
            )
        except NotFoundError:
            _LOGGER.info("Data set %s has no refresh properties", data_set_id)
            return RefreshPropertiesLookup.absent()
        except QuickSightApiError as exc:
            return RefreshPropertiesLookup.failed(exc)
        properties = response.get("DataSetRefreshProperties")
        if properties is None:
            _LOGGER.info("Data set %s returned no refresh properties", data_set_id)
            return RefreshPropertiesLookup.absent()
        return RefreshPropertiesLookup.found(properties)

    def create_data_set(self, **parameters: Any) -> Mapping[str, Any]:
        return self._invoke("CreateDataSet", self._client.create_data_set, **parameters)

    def put_data_set_refresh_properties(
        self, account_id: str, data_set_id: str, properties: Mapping[str, Any]
    ) -> Mapping[str, Any]:
        return self._invoke(
            "PutDataSetRefreshProperties",
            self._client.put_data_set_refresh_properties,
            AwsAccountId=account_id,
            DataSetId=data_set_id,
            DataSetRefreshProperties=properties,
        )

    def _invoke(self, operation: str, method: Any, **kwargs: Any) -> Mapping[str, Any]:
        _LOGGER.debug("Calling %s", operation)
        try:
            return method(**kwargs)
        except ClientError as exc:
            error = exc.response.get("Error", {})
            code = error.get("Code")
            message = error.get("Message") or str(exc)
            if code == RESOURCE_NOT_FOUND_CODE:
                raise NotFoundError(operation, message, error_code=code) from exc
            raise RemoteError(operation, f"{code}: {message}", error_code=code) from exc
        except (NoCredentialsError, PartialCredentialsError) as exc:
            raise ConfigurationError(f"Unable to resolve AWS credentials: {exc}") from exc
        except BotoCoreError as exc:
            raise RemoteError(operation, str(exc)) from exc


def create_quicksight_gateway(context: CopyContext) -> QuickSightGateway:
    """Create a gateway over a boto3 QuickSight client for the resolved context."""
    try:
        session = boto3.Session(profile_name=context.profile, region_name=context.region)
        client = session.client("quicksight")
    except BotoCoreError as exc:
        raise ConfigurationError(f"Unable to create QuickSight client: {exc}") from exc
    _LOGGER.info(
        "QuickSight client ready (account=%s, region=%s, profile=%s)",
        context.account_id,
        client.meta.region_name,
        context.profile or "default-chain",
    )
    return QuickSightGateway(client)
