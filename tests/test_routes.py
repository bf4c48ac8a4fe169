from use_cases import routes


def test_static_routes():
    assert routes.parse_route("/login").view == "login"
    assert routes.parse_route("signup").view == "signup"
    assert routes.parse_route("/forgot-password").view == "forgot_password"
    assert routes.parse_route("/settings/").view == "settings"


def test_parameterized_routes():
    route = routes.parse_route(routes.project_route(12))
    assert route.view == "project"
    assert route.param == "12"
    assert route.is_protected

    reset = routes.parse_route(routes.reset_password_route("abc"))
    assert reset.view == "reset_password"
    assert reset.param == "abc"
    assert not reset.is_protected


def test_unknown_or_missing_route_defaults_to_dashboard():
    assert routes.parse_route(None).view == "dashboard"
    assert routes.parse_route("/nowhere").view == "dashboard"
    assert routes.parse_route("/project/").view == "dashboard"


def test_parse_project_id():
    assert routes.parse_project_id("7") == 7
    assert routes.parse_project_id("seven") is None
    assert routes.parse_project_id(None) is None
