import boto3
import pytest
from botocore.stub import Stubber

from lumberjack.engine import ClientInitError
from lumberjack.store import CloudWatchLogStore, RawEvent


@pytest.fixture
def logs_client():
    client = boto3.client(
        "logs",
        region_name="eu-west-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )
    with Stubber(client) as stubber:
        yield client, stubber
        stubber.assert_no_pending_responses()


def test_list_groups_follows_pages(logs_client):
    client, stubber = logs_client
    stubber.add_response(
        "describe_log_groups",
        {"logGroups": [{"logGroupName": "/ecs/web"}], "nextToken": "t1"},
        {},
    )
    stubber.add_response(
        "describe_log_groups",
        {"logGroups": [{"logGroupName": "/aws/lambda/api"}]},
        {"nextToken": "t1"},
    )
    store = CloudWatchLogStore(client=client)
    assert store.list_groups() == ["/aws/lambda/api", "/ecs/web"]


def test_query_events_maps_page(logs_client):
    client, stubber = logs_client
    stubber.add_response(
        "filter_log_events",
        {
            "events": [{"timestamp": 1000, "message": "hello", "logStreamName": "s", "eventId": "1"}],
            "nextToken": "next",
        },
        {
            "logGroupName": "/ecs/web",
            "startTime": 0,
            "endTime": 5000,
            "filterPattern": "{ $.a = 1 }",
            "nextToken": "prev",
        },
    )
    page = CloudWatchLogStore(client=client).query_events("/ecs/web", 0, 5000, "{ $.a = 1 }", "prev")
    assert page.events == [RawEvent(1000, "hello")]
    assert page.next_cursor == "next"


def test_query_events_omits_empty_optionals(logs_client):
    client, stubber = logs_client
    stubber.add_response(
        "filter_log_events",
        {"events": []},
        {"logGroupName": "/ecs/web", "startTime": 0},
    )
    page = CloudWatchLogStore(client=client).query_events("/ecs/web", 0, None, "  ")
    assert page.events == []
    assert page.next_cursor is None


def test_service_error_propagates(logs_client):
    client, stubber = logs_client
    stubber.add_client_error("filter_log_events", service_error_code="ResourceNotFoundException")
    store = CloudWatchLogStore(client=client)
    with pytest.raises(Exception) as exc:
        store.query_events("/missing", 0, None, "")
    assert "ResourceNotFoundException" in str(exc.value)


def test_unknown_profile_is_client_init_error(tmp_path, monkeypatch):
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "config"))
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "credentials"))
    with pytest.raises(ClientInitError):
        CloudWatchLogStore(region="eu-west-1", profile="does-not-exist")
