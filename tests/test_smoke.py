def test_imports():
    """Ensure core modules can be imported without crashing."""
    import auth  # noqa: F401
    import ui  # noqa: F401
    import use_cases  # noqa: F401
    import utils.session_manager  # noqa: F401
    import utils.parallel  # noqa: F401
    import infrastructure.api.gateway  # noqa: F401
    import infrastructure.api.sentinel_api  # noqa: F401
    import infrastructure.storage.credential_store  # noqa: F401
    import views.navigation  # noqa: F401
    import views.login_view  # noqa: F401
    import views.password_view  # noqa: F401
    import views.dashboard_view  # noqa: F401
    import views.project_view  # noqa: F401
    import views.settings_view  # noqa: F401
