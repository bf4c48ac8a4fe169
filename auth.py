import logging
import os
from typing import Optional

import streamlit as st

from infrastructure.api.gateway import ApiGateway, GatewayError
from infrastructure.api.sentinel_api import SentinelApi
from use_cases.errors import PasswordMismatchError, ValidationError

log = logging.getLogger(__name__)

DEFAULT_API_URL = "http://127.0.0.1:8000"
MIN_PASSWORD_LENGTH = 8
RESET_REQUESTED_MESSAGE = "If an account with that email exists, a password reset link has been sent."
GENERIC_ERROR_MESSAGE = "An unexpected error occurred."


class AuthError(Exception):
    pass


class UserAlreadyExistsError(AuthError):
    pass


class InvalidCredentialsError(AuthError):
    pass


class InvalidResetTokenError(AuthError):
    pass


def get_secret(key):
    try:
        return st.secrets.get(key)
    except FileNotFoundError:
        return None
    except Exception:
        # No secrets.toml and no script run context (bare mode, tests)
        return None


def get_setting(key, default=None):
    return get_secret(key) or os.getenv(key) or default


def get_api_base_url() -> str:
    return get_setting("SENTINEL_API_URL", DEFAULT_API_URL)


def get_api_timeout() -> Optional[float]:
    raw = get_setting("SENTINEL_API_TIMEOUT")
    if not raw:
        return None
    try:
        return float(raw)
    except (TypeError, ValueError):
        log.warning(f"Ignoring invalid SENTINEL_API_TIMEOUT={raw!r}")
        return None


def cookie_secure() -> bool:
    return str(get_setting("SENTINEL_COOKIE_SECURE", "False")).lower() == "true"


def trust_proxy() -> bool:
    return str(get_setting("TRUST_PROXY", "False")).lower() == "true"


def get_client_ip() -> str:
    """Extract IP honoring TRUST_PROXY for reverse proxies."""
    if trust_proxy():
        try:
            headers = st.context.headers
        except Exception:
            headers = {}
        forwarded = headers.get("x-forwarded-for")
        if forwarded:
            return forwarded.split(",")[0].strip()
        real_ip = headers.get("x-real-ip")
        if real_ip:
            return real_ip.strip()
    return "127.0.0.1"


def build_api(credential_store) -> SentinelApi:
    gateway = ApiGateway(get_api_base_url(), credential_store, timeout=get_api_timeout())
    return SentinelApi(gateway)


def _require_credentials(email, password):
    if not email or not email.strip() or not password:
        raise ValidationError("Email and password are required.")


def authenticate_user(api: SentinelApi, email, password) -> str:
    _require_credentials(email, password)
    try:
        return api.authenticate(email.strip(), password)
    except (GatewayError, ValueError) as e:
        log.warning(f"Login rejected for client {get_client_ip()}: {e}")
        raise InvalidCredentialsError("Invalid email or password. Please try again.") from e


def create_user(api: SentinelApi, email, password, password_confirm=None):
    _require_credentials(email, password)
    if password_confirm is not None and password != password_confirm:
        raise PasswordMismatchError("Passwords do not match.")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters.")
    try:
        api.create_account(email.strip(), password)
    except GatewayError as e:
        log.info(f"Signup rejected: {e}")
        raise UserAlreadyExistsError("Failed to create account. The email may already be in use.") from e


def request_password_reset(api: SentinelApi, email) -> str:
    """Always answers with a neutral message so account existence never leaks."""
    if not email or not email.strip():
        raise ValidationError("Email is required.")
    try:
        message = api.request_password_reset(email.strip())
    except GatewayError as e:
        log.info(f"Password reset request failed: {e}")
        return RESET_REQUESTED_MESSAGE
    return message or RESET_REQUESTED_MESSAGE


def reset_password(api: SentinelApi, token, new_password, password_confirm) -> str:
    if new_password != password_confirm:
        raise PasswordMismatchError("Passwords do not match.")
    if not new_password:
        raise ValidationError("New password is required.")
    try:
        return api.reset_password(token, new_password)
    except GatewayError as e:
        log.info(f"Password reset failed: {e}")
        raise InvalidResetTokenError(e.detail or GENERIC_ERROR_MESSAGE) from e
