import json
import logging
from typing import Optional
from urllib.parse import unquote

import streamlit as st
import streamlit.components.v1 as components

log = logging.getLogger(__name__)

COOKIE_NAME = "sentinel_access_token"


class InMemoryCredentialStore:
    """Process-local token holder. Used headless and in tests."""

    def __init__(self, token: Optional[str] = None):
        self._token = token or None

    def get(self) -> Optional[str]:
        return self._token

    def set(self, token: str) -> None:
        self._token = token

    def clear(self) -> None:
        self._token = None


class BrowserCredentialStore(InMemoryCredentialStore):
    """
    Keeps the bearer token in memory and mirrors it into the browser
    (cookie + localStorage) so a full page reload can restore it.

    Reads never touch Streamlit, so `get()` is safe from worker threads.
    """

    def __init__(self, token: Optional[str] = None, secure: bool = False):
        super().__init__(token)
        self.secure = secure

    @classmethod
    def from_browser(cls, secure: bool = False) -> "BrowserCredentialStore":
        try:
            raw = st.context.cookies.get(COOKIE_NAME)
        except Exception:
            # st.context is unavailable outside a script run (bare mode, tests)
            raw = None
        token = unquote(raw) if raw else None
        if token:
            log.info("Restored credential from browser cookie")
        return cls(token, secure=secure)

    def _cookie_attrs(self) -> str:
        attrs = "path=/; SameSite=Strict"
        if self.secure:
            attrs += "; Secure"
        return attrs

    def set(self, token: str) -> None:
        super().set(token)
        token_js = json.dumps(token)
        attrs = self._cookie_attrs()
        components.html(
            f"""
            <script>
              var token = {token_js};
              var cookieStr = "{COOKIE_NAME}=" + encodeURIComponent(token) + "; {attrs}";
              document.cookie = cookieStr;
              localStorage.setItem("{COOKIE_NAME}", token);
              try {{
                window.parent.document.cookie = cookieStr;
              }} catch (e) {{}}
            </script>
            """,
            height=0,
        )

    def clear(self) -> None:
        super().clear()
        attrs = self._cookie_attrs()
        components.html(
            f"""
            <script>
              var expired = "{COOKIE_NAME}=; max-age=0; {attrs}";
              document.cookie = expired;
              localStorage.removeItem("{COOKIE_NAME}");
              try {{
                window.parent.document.cookie = expired;
              }} catch (e) {{}}
            </script>
            """,
            height=0,
        )

    def restore_missing_cookie(self) -> None:
        """
        Recover the cookie from localStorage when the browser dropped it
        (idle expiry, restart) and reload once so the next run picks it up.
        """
        if self.get():
            return
        attrs = self._cookie_attrs()
        components.html(
            f"""
            <script>
            (function () {{
              try {{
                var token = localStorage.getItem("{COOKIE_NAME}");
                var attempted = sessionStorage.getItem("{COOKIE_NAME}_restore_attempted");
                var doc = window.parent.document;
                var hasCookie = doc.cookie.split("; ").some(function (x) {{
                  return x.trim().indexOf("{COOKIE_NAME}=") === 0;
                }});
                if (token && !hasCookie && !attempted) {{
                  sessionStorage.setItem("{COOKIE_NAME}_restore_attempted", "1");
                  var cookieStr = "{COOKIE_NAME}=" + encodeURIComponent(token) + "; {attrs}";
                  document.cookie = cookieStr;
                  doc.cookie = cookieStr;
                  window.parent.location.reload();
                }}
              }} catch (e) {{
                console.error("Credential restore failed", e);
              }}
            }})();
            </script>
            """,
            height=0,
        )
