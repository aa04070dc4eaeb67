"""Tests for user account tools."""

import pytest
from unittest.mock import Mock
import json

from mcp.server.fastmcp.exceptions import ToolError
from mcp.types import TextContent

from useradd_mcp.config.models import DirectoryConfig
from useradd_mcp.core.accounts import AccountCreator
from useradd_mcp.core.commands import ExternalToolError
from useradd_mcp.core.directory import DirectoryReader
from useradd_mcp.core.records import AccountCreationRequest
from useradd_mcp.tools.user import UserTools


PASSWD = [
    "root:x:0:0:root:/root:/bin/bash",
    "alice:x:1000:1000:Alice:/home/alice:/bin/bash",
    "bob:x:1001:1001:Bob:/home/bob:/bin/bash",
]

GROUP = [
    "root:x:0:",
    "wheel:x:10:alice,bob",
    "staff:x:50:alice",
]


@pytest.fixture
def mock_runner():
    """Mock command runner for testing."""
    runner = Mock()

    def enumerate(database, key=None):
        lines = PASSWD if database == "passwd" else GROUP
        if key:
            return [line for line in lines if line.split(':')[0] == key]
        return list(lines)

    runner.enumerate.side_effect = enumerate
    runner.useradd.return_value = (0, "")
    return runner


@pytest.fixture
def user_tools(mock_runner):
    """User tools instance for testing."""
    return UserTools(DirectoryReader(mock_runner, DirectoryConfig()), AccountCreator(mock_runner))


class TestListUsers:
    """Test the listing tool."""

    def test_list_users_success(self, user_tools):
        result = user_tools.list_users()

        assert len(result) == 1
        assert isinstance(result[0], TextContent)

        response_data = json.loads(result[0].text)
        assert [u['username'] for u in response_data['users']] == ["root", "alice", "bob"]
        assert [g['name'] for g in response_data['groups']] == ["root", "wheel", "staff"]

        alice = response_data['users'][1]
        assert alice == {
            "username": "alice",
            "password": "x",
            "uid": 1000,
            "gid": 1000,
            "comment": "Alice",
            "home": "/home/alice",
            "shell": "/bin/bash",
            "is_system_user": False,
            "groups": ["wheel", "staff"],
        }
        assert response_data['users'][0]['is_system_user'] == True
        assert response_data['users'][2]['groups'] == ["wheel"]

    def test_list_users_filtered_omits_groups(self, user_tools):
        result = user_tools.list_users("bob")

        response_data = json.loads(result[0].text)
        assert [u['username'] for u in response_data['users']] == ["bob"]
        assert 'groups' not in response_data

    def test_list_users_filtered_absent(self, user_tools):
        response_data = json.loads(user_tools.list_users("nobody")[0].text)
        assert response_data == {"users": []}

    def test_empty_username_lists_everything(self, user_tools):
        response_data = json.loads(user_tools.list_users("")[0].text)
        assert 'groups' in response_data
        assert len(response_data['users']) == 3

    def test_list_users_failure_is_tool_error(self, user_tools, mock_runner):
        mock_runner.enumerate.side_effect = ExternalToolError(["getent", "passwd"], 1, "broken nsswitch")

        with pytest.raises(ToolError, match="broken nsswitch"):
            user_tools.list_users()


class TestAddUser:
    """Test the account creation tool."""

    def test_add_user_success(self, user_tools, mock_runner):
        result = user_tools.add_user(AccountCreationRequest(username="carol", create_home=True))

        response_data = json.loads(result[0].text)
        assert response_data == {"success": True, "message": ""}
        mock_runner.useradd.assert_called_once_with(["-m", "carol"])

    def test_add_user_failure_is_normal_response(self, user_tools, mock_runner):
        mock_runner.useradd.return_value = (9, "useradd: user 'bob' already exists\n")

        result = user_tools.add_user(AccountCreationRequest(username="bob"))

        response_data = json.loads(result[0].text)
        assert response_data['success'] == False
        assert response_data['message'] == "useradd: user 'bob' already exists\n"

    def test_add_user_launch_failure(self, user_tools, mock_runner):
        mock_runner.useradd.side_effect = ExternalToolError(["useradd", "bob"], output="Permission denied")

        with pytest.raises(ToolError, match="Permission denied"):
            user_tools.add_user(AccountCreationRequest(username="bob"))


def test_schema_info(user_tools):
    schema = user_tools.get_schema_info()
    assert schema['operations'] == ["ListUsers", "AddUser"]
    assert "selinux_range" in schema['add_user_options']
    assert "username" not in schema['add_user_options']


def test_list_users_rejects_option_like_username(user_tools, mock_runner):
    with pytest.raises(ToolError, match="must not start with '-'"):
        user_tools.list_users("-s")
    mock_runner.enumerate.assert_not_called()
