import copy

from authwidget.oauth import filter_oauth_params


def test_no_overrides_returns_config():
    config = {"baseUrl": "foo", "authParams": {"bar": "bazz"}}
    assert filter_oauth_params({}, config) == {"baseUrl": "foo", "authParams": {"bar": "bazz"}}


def test_overrides_top_level_and_auth_params():
    config = {"baseUrl": "foo", "authParams": {"bar": "bazz"}}
    options = {"baseUrl": "bazz", "bar": "foo"}
    assert filter_oauth_params(options, config) == {"baseUrl": "bazz", "authParams": {"bar": "foo"}}


def test_token_flags_build_response_type():
    options = {"getAccessToken": True, "getIdToken": True}
    assert filter_oauth_params(options, {"baseUrl": "foo"}) == {
        "baseUrl": "foo",
        "authParams": {"responseType": ["token", "id_token"]},
    }


def test_false_flags_leave_response_type_alone():
    config = {"baseUrl": "foo", "authParams": {"responseType": ["code"]}}
    options = {"getAccessToken": False, "getIdToken": None}
    assert filter_oauth_params(options, config) == config


def test_complex_merge():
    config = {
        "baseUrl": "foo",
        "clientId": "cid",
        "authParams": {"responseType": ["id_token"], "scopes": ["openid"]},
    }
    options = {
        "getAccessToken": True,
        "oAuthTimeout": 3000,
        "scopes": ["openid", "profile"],
        "clientId": "bar",
        "display": "page",
    }
    result = filter_oauth_params(options, config)
    assert result["baseUrl"] == "foo"
    assert result["clientId"] == "bar"
    assert result["oAuthTimeout"] == 3000
    assert result["authParams"] == {
        "responseType": ["id_token", "token"],
        "scopes": ["openid", "profile"],
        "display": "page",
    }


def test_flag_does_not_duplicate_existing_response_type():
    config = {"baseUrl": "foo", "authParams": {"responseType": ["id_token"]}}
    result = filter_oauth_params({"getIdToken": True, "getAccessToken": True}, config)
    assert result["authParams"]["responseType"] == ["id_token", "token"]


def test_nested_auth_params_option_is_merged():
    config = {"baseUrl": "foo", "authParams": {"scopes": ["openid"], "display": "popup"}}
    result = filter_oauth_params({"authParams": {"display": "page"}}, config)
    assert result["authParams"] == {"scopes": ["openid"], "display": "page"}


def test_inputs_are_not_mutated():
    config = {"baseUrl": "foo", "authParams": {"responseType": ["id_token"], "scopes": ["openid"]}}
    options = {"getAccessToken": True, "display": "page"}
    config_before = copy.deepcopy(config)
    options_before = copy.deepcopy(options)
    filter_oauth_params(options, config)
    assert config == config_before
    assert options == options_before


def test_string_response_type_is_one_value():
    config = {"baseUrl": "foo", "authParams": {"responseType": "id_token"}}
    result = filter_oauth_params({"getAccessToken": True}, config)
    assert result["authParams"]["responseType"] == ["id_token", "token"]
    assert filter_oauth_params({}, config) == config
    assert filter_oauth_params({"getIdToken": True}, config) == config
