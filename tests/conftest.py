"""
Shared pytest fixtures: fake AWS environment and canned EC2 responses.
"""

from unittest.mock import MagicMock, patch

import pytest


@pytest.fixture(autouse=True)
def aws_environment(monkeypatch):
    """Keep tests away from real credentials"""
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.delenv("AWS_PROFILE", raising=False)
    yield


def network_interface(id, status="in-use", instance_id=None, attached=True):
    record = {
        "NetworkInterfaceId": id,
        "Status": status,
        "Description": "",
        "Groups": [{"GroupId": "sg-0123", "GroupName": "web"}],
    }
    if attached:
        record["Attachment"] = {"AttachmentId": "eni-attach-" + id[4:],
                                "Status": "attached"}
        if instance_id is not None:
            record["Attachment"]["InstanceId"] = instance_id
    return record


@pytest.fixture
def interfaces_by_group():
    """describe_network_interfaces responses keyed by group name"""
    return {
        "web": {
            "NetworkInterfaces": [
                network_interface("eni-0aaa", instance_id="i-123"),
                network_interface("eni-0bbb", status="available",
                                  attached=False),
            ]
        },
        "db": {
            "NetworkInterfaces": [
                network_interface("eni-0ccc", instance_id="i-456"),
            ]
        },
        "empty": {"NetworkInterfaces": []},
    }


@pytest.fixture
def mock_ec2_client(interfaces_by_group):
    """EC2 client that answers group-name filtered lookups"""
    client = MagicMock()

    def describe_network_interfaces(Filters):
        name = Filters[0]["Values"][0]
        return interfaces_by_group.get(name, {"NetworkInterfaces": []})

    client.describe_network_interfaces.side_effect = describe_network_interfaces
    with patch("sginterfaces.get_boto3_client", return_value=client):
        yield client
