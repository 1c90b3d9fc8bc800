"""
Tests building the form payloads.
"""

from usergroups.core import options, payload

TOKEN = "xoxb-token"


def test_create_only_mandatory():
    params = options.CreateUserGroupParams()

    assert payload.create_payload(TOKEN, "eng", params) == {
        "token": TOKEN,
        "name": "eng",
    }


def test_create_all_options():
    params = options.apply_options(
        options.CreateUserGroupParams(),
        [
            options.create_option_handle("eng"),
            options.create_option_description("Engineering"),
            options.create_option_channels(["C1", "C2", "C3"]),
            options.create_option_team_id("T1"),
        ],
    )

    assert payload.create_payload(TOKEN, "Engineering", params) == {
        "token": TOKEN,
        "name": "Engineering",
        "handle": "eng",
        "description": "Engineering",
        "channels": "C1,C2,C3",
        "team_id": "T1",
    }


def test_create_empty_values_are_omitted():
    params = options.apply_options(
        options.CreateUserGroupParams(),
        [
            options.create_option_handle(""),
            options.create_option_description(""),
            options.create_option_channels([]),
            options.create_option_team_id(""),
        ],
    )

    assert set(payload.create_payload(TOKEN, "eng", params)) == {"token", "name"}


def test_flags_sent_only_when_true():
    params = options.apply_options(
        options.GetUserGroupsParams(),
        [
            options.get_option_include_count(True),
            options.get_option_include_disabled(False),
            options.get_option_include_users(True),
        ],
    )

    assert payload.list_payload(TOKEN, params) == {
        "token": TOKEN,
        "include_count": "true",
        "include_users": "true",
    }


def test_list_no_options():
    assert payload.list_payload(TOKEN, options.GetUserGroupsParams()) == {
        "token": TOKEN
    }


def test_disable_payload():
    params = options.apply_options(
        options.DisableUserGroupParams(),
        [
            options.disable_option_include_count(True),
            options.disable_option_team_id("T1"),
        ],
    )

    assert payload.disable_payload(TOKEN, "S1", params) == {
        "token": TOKEN,
        "usergroup": "S1",
        "include_count": "true",
        "team_id": "T1",
    }


def test_update_untouched_fields_are_absent():
    values = payload.update_payload(TOKEN, "S1", options.UpdateUserGroupParams())

    assert values == {"token": TOKEN, "usergroup": "S1"}


def test_update_explicit_empty_fields_are_sent():
    params = options.apply_options(
        options.UpdateUserGroupParams(),
        [
            options.update_option_description(""),
            options.update_option_channels([]),
            options.update_option_team_id(""),
        ],
    )

    values = payload.update_payload(TOKEN, "S1", params)

    assert values["description"] == ""
    assert values["channels"] == ""
    assert values["team_id"] == ""


def test_update_name_and_handle_omitted_when_empty():
    params = options.apply_options(
        options.UpdateUserGroupParams(),
        [
            options.update_option_name(""),
            options.update_option_handle(""),
            options.update_option_channels(["C1", "C2"]),
        ],
    )

    assert payload.update_payload(TOKEN, "S1", params) == {
        "token": TOKEN,
        "usergroup": "S1",
        "channels": "C1,C2",
    }


def test_members_payload():
    params = options.apply_options(
        options.GetUserGroupMembersParams(),
        [options.members_option_include_disabled(True)],
    )

    assert payload.members_payload(TOKEN, "S1", params) == {
        "token": TOKEN,
        "usergroup": "S1",
        "include_disabled": "true",
    }


def test_update_members_payload():
    params = options.apply_options(
        options.UpdateUserGroupMembersParams(),
        [options.update_members_option_include_count(True)],
    )

    assert payload.update_members_payload(TOKEN, "S1", "U1,U2", params) == {
        "token": TOKEN,
        "usergroup": "S1",
        "users": "U1,U2",
        "include_count": "true",
    }


def test_join_list():
    assert payload.join_list(["C1", "C2", "C3"]) == "C1,C2,C3"
    assert payload.join_list(["C1"]) == "C1"
    assert payload.join_list([]) == ""
