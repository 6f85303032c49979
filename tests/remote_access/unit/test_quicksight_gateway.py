"""QuickSight gateway tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError, NoCredentialsError
from quicksight_object_copier.configuration import ConfigurationError, CopyContext
from quicksight_object_copier.remote_access import (
    NotFoundError,
    QuickSightGateway,
    RefreshLookupStatus,
    RemoteError,
    create_quicksight_gateway,
)


class FakeQuickSightClient:
    def __init__(
        self,
        responses: dict[str, Any] | None = None,
        errors: dict[str, Exception] | None = None,
    ) -> None:
        self.responses = responses or {}
        self.errors = errors or {}
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def __getattr__(self, name: str):
        if not name.startswith(("describe_", "create_", "put_")):
            raise AttributeError(name)

        def _call(**kwargs: Any) -> Any:
            self.calls.append((name, kwargs))
            if name in self.errors:
                raise self.errors[name]
            return self.responses.get(name, {})

        return _call


def _client_error(code: str, operation: str, message: str = "boom") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": message}}, operation)


def test_describe_analysis_returns_analysis_member_and_passes_ids() -> None:
    client = FakeQuickSightClient(
        responses={"describe_analysis": {"Analysis": {"AnalysisId": "A1", "ThemeArn": "T1"}}}
    )

    analysis = QuickSightGateway(client).describe_analysis("111122223333", "A1")

    assert analysis == {"AnalysisId": "A1", "ThemeArn": "T1"}
    assert client.calls == [
        ("describe_analysis", {"AwsAccountId": "111122223333", "AnalysisId": "A1"})
    ]


def test_describe_permissions_default_to_empty_list() -> None:
    gateway = QuickSightGateway(FakeQuickSightClient())

    assert gateway.describe_analysis_permissions("1", "A1") == []
    assert gateway.describe_data_set_permissions("1", "S1") == []


def test_resource_not_found_is_translated_to_not_found_error() -> None:
    client = FakeQuickSightClient(
        errors={
            "describe_analysis_definition": _client_error(
                "ResourceNotFoundException", "DescribeAnalysisDefinition", "no analysis A9"
            )
        }
    )

    with pytest.raises(NotFoundError) as excinfo:
        QuickSightGateway(client).describe_analysis_definition("1", "A9")

    assert excinfo.value.operation == "DescribeAnalysisDefinition"
    assert excinfo.value.error_code == "ResourceNotFoundException"
    assert "no analysis A9" in str(excinfo.value)


def test_other_client_errors_are_translated_to_remote_error() -> None:
    client = FakeQuickSightClient(
        errors={"create_analysis": _client_error("ResourceExistsException", "CreateAnalysis")}
    )

    with pytest.raises(RemoteError) as excinfo:
        QuickSightGateway(client).create_analysis(AnalysisId="A2")

    assert not isinstance(excinfo.value, NotFoundError)
    assert excinfo.value.error_code == "ResourceExistsException"
    assert str(excinfo.value).startswith("CreateAnalysis: ResourceExistsException")


def test_botocore_errors_are_translated_to_remote_error() -> None:
    client = FakeQuickSightClient(
        errors={"describe_data_set": EndpointConnectionError(endpoint_url="https://example")}
    )

    with pytest.raises(RemoteError) as excinfo:
        QuickSightGateway(client).describe_data_set("1", "S1")

    assert excinfo.value.error_code is None


def test_missing_credentials_are_translated_to_configuration_error() -> None:
    client = FakeQuickSightClient(errors={"describe_data_set": NoCredentialsError()})

    with pytest.raises(ConfigurationError, match="Unable to resolve AWS credentials"):
        QuickSightGateway(client).describe_data_set("1", "S1")


def test_refresh_properties_lookup_found() -> None:
    properties = {"RefreshConfiguration": {"IncrementalRefresh": {}}}
    client = FakeQuickSightClient(
        responses={"describe_data_set_refresh_properties": {"DataSetRefreshProperties": properties}}
    )

    lookup = QuickSightGateway(client).describe_data_set_refresh_properties("1", "S1")

    assert lookup.status is RefreshLookupStatus.FOUND
    assert lookup.properties is properties
    assert lookup.error is None


def test_refresh_properties_lookup_absent_on_resource_not_found() -> None:
    client = FakeQuickSightClient(
        errors={
            "describe_data_set_refresh_properties": _client_error(
                "ResourceNotFoundException", "DescribeDataSetRefreshProperties"
            )
        }
    )

    lookup = QuickSightGateway(client).describe_data_set_refresh_properties("1", "S1")

    assert lookup.status is RefreshLookupStatus.ABSENT
    assert lookup.properties is None


def test_refresh_properties_lookup_detects_not_found_by_code_not_message() -> None:
    client = FakeQuickSightClient(
        errors={
            "describe_data_set_refresh_properties": _client_error(
                "ThrottlingException",
                "DescribeDataSetRefreshProperties",
                "ResourceNotFoundException mentioned in text only",
            )
        }
    )

    lookup = QuickSightGateway(client).describe_data_set_refresh_properties("1", "S1")

    assert lookup.status is RefreshLookupStatus.FAILED
    assert isinstance(lookup.error, RemoteError)
    assert lookup.error.error_code == "ThrottlingException"


def test_put_refresh_properties_targets_given_data_set() -> None:
    client = FakeQuickSightClient()
    properties = {"RefreshConfiguration": {}}

    QuickSightGateway(client).put_data_set_refresh_properties("1", "S2", properties)

    assert client.calls == [
        (
            "put_data_set_refresh_properties",
            {"AwsAccountId": "1", "DataSetId": "S2", "DataSetRefreshProperties": properties},
        )
    ]


@pytest.fixture
def isolated_aws_environment(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "config"))
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "credentials"))
    for name in ("AWS_PROFILE", "AWS_DEFAULT_PROFILE", "AWS_REGION", "AWS_DEFAULT_REGION"):
        monkeypatch.delenv(name, raising=False)


def test_create_quicksight_gateway_builds_client_for_region(isolated_aws_environment) -> None:
    gateway = create_quicksight_gateway(CopyContext(account_id="1", region="eu-west-1"))

    assert isinstance(gateway, QuickSightGateway)


def test_create_quicksight_gateway_rejects_unknown_profile(isolated_aws_environment) -> None:
    context = CopyContext(account_id="1", region="eu-west-1", profile="missing-profile")

    with pytest.raises(ConfigurationError, match="Unable to create QuickSight client"):
        create_quicksight_gateway(context)


def test_create_quicksight_gateway_requires_a_region(isolated_aws_environment) -> None:
    with pytest.raises(ConfigurationError, match="Unable to create QuickSight client"):
        create_quicksight_gateway(CopyContext(account_id="1", region=None))


def test_describe_analysis_definition_returns_none_when_member_missing() -> None:
    client = FakeQuickSightClient(responses={"describe_analysis_definition": {"Status": 200}})

    assert QuickSightGateway(client).describe_analysis_definition("1", "A1") is None


def test_refresh_properties_lookup_absent_when_member_missing() -> None:
    client = FakeQuickSightClient(
        responses={"describe_data_set_refresh_properties": {"Status": 200}}
    )

    lookup = QuickSightGateway(client).describe_data_set_refresh_properties("1", "S1")

    assert lookup.status is RefreshLookupStatus.ABSENT
    assert lookup.properties is None
