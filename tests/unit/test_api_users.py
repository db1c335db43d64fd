"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Cumulocity Core Client, a product of Garudex Labs

Tests for users, the current user, groups and roles.
"""

import json

import pytest

from cumulocity.exceptions import DecodeError, UnstructuredApiError
from cumulocity.models import CurrentUser, Group, SubscribedRole, SubscribedUser, User
from cumulocity.models.users import Link


class TestUsersApi:
    @pytest.mark.asyncio
    async def test_create_user_clears_server_fields(self, client, mock_adapter):
        mock_adapter.add_response(
            "POST", "/user/t100/users", json_body={"id": "jdoe", "userName": "jdoe", "passwordStrength": "GREEN"}
        )

        user = await client.users.users.create_user(
            User(
                id="jdoe",
                user_name="jdoe",
                email="jdoe@example.com",
                display_name="J. Doe",
                newsletter=True,
                should_reset_password=False,
                enabled=True,
            ),
            "t100",
        )

        assert user.user_name == "jdoe"
        assert json.loads(mock_adapter.last_request.body) == {
            "userName": "jdoe",
            "email": "jdoe@example.com",
            "enabled": True,
        }

    @pytest.mark.asyncio
    async def test_user_paths_substitute_values_as_given(self, client, mock_adapter):
        mock_adapter.add_response("GET", "/user/t100/users/device_a/b", json_body={"id": "device_a/b"})
        mock_adapter.add_response("GET", "/user/t100/userByName/j doe", json_body={"userName": "j doe"})

        api = client.users.users
        assert (await api.get_user("t100", "device_a/b")).id == "device_a/b"
        assert (await api.get_user_by_username("t100", "j doe")).user_name == "j doe"

    @pytest.mark.asyncio
    async def test_get_users_query(self, client, mock_adapter):
        mock_adapter.add_response("GET", "/user/t100/users", json_body={"users": []})

        await client.users.users.get_users("t100", only_devices=False, username="j", with_subusers_count=True)

        assert mock_adapter.last_request.params == (
            ("onlyDevices", "false"),
            ("username", "j"),
            ("withSubusersCount", "true"),
        )

    @pytest.mark.asyncio
    async def test_group_membership(self, client, mock_adapter):
        mock_adapter.add_response(
            "POST",
            "/user/t100/groups/2/users",
            json_body={"self": "https://x/user/t100/groups/2/users/jdoe", "user": {"id": "jdoe"}},
        )
        mock_adapter.add_response(
            "GET", "/user/t100/groups/2/users", json_body={"references": [{"user": {"userName": "jdoe"}}]}
        )
        mock_adapter.add_response("DELETE", "/user/t100/groups/2/users/jdoe", status_code=204)

        api = client.users.users
        reference = await api.assign_user_to_user_group(
            SubscribedUser(user=Link(self_="https://x/user/t100/users/jdoe")), "t100", 2
        )
        assert reference.user.id == "jdoe"
        assert mock_adapter.last_request.body == b'{"user":{"self":"https://x/user/t100/users/jdoe"}}'

        members = await api.get_users_from_user_group("t100", 2)
        assert members.references[0].user.user_name == "jdoe"
        assert await api.remove_user_from_user_group("t100", 2, "jdoe") == b""

    @pytest.mark.asyncio
    async def test_update_and_delete_user(self, client, mock_adapter):
        mock_adapter.add_response("PUT", "/user/t100/users/jdoe", json_body={"id": "jdoe", "phone": "+1"})
        mock_adapter.add_response("DELETE", "/user/t100/users/jdoe", status_code=204)

        api = client.users.users
        updated = await api.update_user(User(id="jdoe", phone="+1", display_name="x"), "t100", "jdoe")
        assert updated.phone == "+1"
        assert json.loads(mock_adapter.last_request.body) == {"phone": "+1"}
        assert await api.delete_user("t100", "jdoe") == b""


class TestCurrentUserApi:
    @pytest.mark.asyncio
    async def test_update_current_user(self, client, mock_adapter):
        mock_adapter.add_response(
            "PUT",
            "/user/currentUser",
            json_body={"userName": "admin", "effectiveRoles": [{"id": "ROLE_ADMIN"}]},
        )

        user = await client.users.current_user.update_current_user(
            CurrentUser(id="admin", first_name="Ada", effective_roles=[], should_reset_password=True)
        )

        assert user.effective_roles[0].id == "ROLE_ADMIN"
        assert json.loads(mock_adapter.last_request.body) == {"firstName": "Ada"}

    @pytest.mark.asyncio
    async def test_invalid_payload_is_fixed_reason(self, client, mock_adapter):
        mock_adapter.add_response("PUT", "/user/currentUser", status_code=422, json_body={"error": "x"})

        with pytest.raises(UnstructuredApiError) as exc_info:
            await client.users.current_user.update_current_user(CurrentUser(password="short"))

        assert exc_info.value.reason == "Unprocessable Entity - invalid payload."

    @pytest.mark.asyncio
    async def test_get_current_user(self, client, mock_adapter):
        mock_adapter.add_response("GET", "/user/currentUser", json_body={"id": "admin"})
        assert (await client.users.current_user.get_current_user()).id == "admin"


class TestGroupsApi:
    @pytest.mark.asyncio
    async def test_group_id_is_numeric(self, client, mock_adapter):
        mock_adapter.add_response("POST", "/user/t100/groups", json_body={"id": 12, "name": "operators"})

        group = await client.users.groups.create_user_group(
            Group(id=99, name="operators", description="Field staff"), "t100"
        )

        assert group.id == 12
        assert json.loads(mock_adapter.last_request.body) == {
            "name": "operators",
            "description": "Field staff",
        }

    @pytest.mark.asyncio
    async def test_string_group_id_fails_decoding(self, client, mock_adapter):
        mock_adapter.add_response("GET", "/user/t100/groups/12", json_body={"id": "12"})

        with pytest.raises(DecodeError, match="Group.id"):
            await client.users.groups.get_user_group("t100", 12)

    @pytest.mark.asyncio
    async def test_lookups(self, client, mock_adapter):
        mock_adapter.add_response("GET", "/user/t100/groupByName/business", json_body={"id": 3, "name": "business"})
        mock_adapter.add_response(
            "GET", "/user/t100/users/jdoe/groups", json_body={"references": [{"group": {"id": 3}}]}
        )
        mock_adapter.add_response("GET", "/user/t100/groups", json_body={"groups": [{"id": 3}]})

        api = client.users.groups
        assert (await api.get_user_group_by_name("t100", "business")).id == 3
        refs = await api.get_user_groups_of_user("t100", "jdoe", page_size=5)
        assert refs.references[0].group.id == 3
        assert mock_adapter.last_request.params == (("pageSize", "5"),)
        assert len((await api.get_user_groups("t100")).groups) == 1

    @pytest.mark.asyncio
    async def test_update_and_delete_group(self, client, mock_adapter):
        mock_adapter.add_response("PUT", "/user/t100/groups/3", json_body={"id": 3, "name": "ops"})
        mock_adapter.add_response("DELETE", "/user/t100/groups/3", status_code=204)

        api = client.users.groups
        assert (await api.update_user_group(Group(id=3, name="ops"), "t100", 3)).name == "ops"
        assert mock_adapter.last_request.body == b'{"name":"ops"}'
        assert await api.delete_user_group("t100", 3) == b""


class TestRolesApi:
    @pytest.mark.asyncio
    async def test_assign_and_unassign_roles(self, client, mock_adapter):
        role_link = SubscribedRole(role=Link(self_="https://x/user/roles/ROLE_ALARM_READ"))
        mock_adapter.add_response(
            "POST", "/user/t100/groups/3/roles", json_body={"role": {"id": "ROLE_ALARM_READ"}}
        )
        mock_adapter.add_response(
            "POST", "/user/t100/users/jdoe/roles", json_body={"role": {"id": "ROLE_ALARM_READ"}}
        )
        mock_adapter.add_response("DELETE", "/user/t100/groups/3/roles/ROLE_ALARM_READ", status_code=204)
        mock_adapter.add_response("DELETE", "/user/t100/users/jdoe/roles/ROLE_ALARM_READ", status_code=204)

        api = client.users.roles
        assert (await api.assign_group_role(role_link, "t100", 3)).role.id == "ROLE_ALARM_READ"
        assert mock_adapter.last_request.body == b'{"role":{"self":"https://x/user/roles/ROLE_ALARM_READ"}}'
        assert (await api.assign_user_role(role_link, "t100", "jdoe")).role.id == "ROLE_ALARM_READ"
        assert await api.unassign_group_role("t100", 3, "ROLE_ALARM_READ") == b""
        assert await api.unassign_user_role("t100", "jdoe", "ROLE_ALARM_READ") == b""

    @pytest.mark.asyncio
    async def test_role_listing(self, client, mock_adapter):
        mock_adapter.add_response("GET", "/user/roles", json_body={"roles": [{"id": "ROLE_A", "name": "ROLE_A"}]})
        mock_adapter.add_response("GET", "/user/roles/ROLE_A", json_body={"id": "ROLE_A"})
        mock_adapter.add_response(
            "GET", "/user/t100/groups/3/roles", json_body={"references": [{"role": {"id": "ROLE_A"}}]}
        )

        api = client.users.roles
        assert (await api.get_user_roles(page_size=100)).roles[0].name == "ROLE_A"
        assert (await api.get_user_role("ROLE_A")).id == "ROLE_A"
        assert (await api.get_group_roles("t100", 3)).references[0].role.id == "ROLE_A"
