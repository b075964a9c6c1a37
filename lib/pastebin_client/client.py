from __future__ import annotations

import logging
from dataclasses import replace

import httpx

from .config_types import ClientState, Visibility
from .encoding import Parameters, build_request, dump_request
from .errors import ApiError, LoginFailed, MissingCredentials, NotLoggedIn
from .options import Option, apply_options, check_expire, check_visibility
from .transport import DEFAULT_TIMEOUT_S, Transport
from .validators import key_ok

logger = logging.getLogger(__name__)

LOGIN_ENDPOINT = "api_login.php"
POST_ENDPOINT = "api_post.php"
DEFAULT_LIST_LIMIT = 100


class PastebinClient:
    """Client for the pastebin.com API.

    Posting as a guest needs no setup::

        with PastebinClient() as c:
            url = c.new_paste_from_file(text, "notes.txt")

    To post as a user, log in once; the session key is kept on the client
    (and in the saved state, see persistence.save_client) and the password
    is dropped::

        c = PastebinClient(set_username("johndoe"), set_password("secret"))
        c.login()

    Options are applied in order and the first failing one raises, so a
    half-configured client is never returned.

    Instances are not thread-safe: update() and login() mutate the client
    without locking. Use one client per thread.
    """

    def __init__(self, *options: Option):
        self._state = ClientState()
        self._password = ""
        self._debug = False
        self._timeout_s = DEFAULT_TIMEOUT_S
        self._http_client: httpx.Client | None = None
        self._t: Transport | None = None
        apply_options(self, options)

    def update(self, *options: Option) -> None:
        """Apply more options. Options applied before a failing one stay applied."""
        apply_options(self, options)

    # --- configuration ---
    @property
    def base_url(self) -> str:
        return self._state.base_url

    @property
    def dev_key(self) -> str:
        return self._state.dev_key

    @property
    def session_key(self) -> str:
        return self._state.session_key

    @property
    def username(self) -> str:
        return self._state.username

    @property
    def expire(self) -> str:
        return self._state.expire

    @property
    def visibility(self) -> Visibility:
        return self._state.visibility

    @property
    def debug(self) -> bool:
        return self._debug

    @property
    def has_password(self) -> bool:
        return self._password != ""

    @property
    def is_logged_in(self) -> bool:
        return key_ok(self._state.session_key)

    @property
    def state(self) -> ClientState:
        """Snapshot of the persistable configuration (no password)."""
        return replace(self._state)

    # --- transport ---
    def _use_http_client(self, http_client: httpx.Client) -> None:
        self.close()
        self._http_client = http_client

    def _use_timeout(self, timeout_s: float) -> None:
        self.close()
        self._timeout_s = timeout_s

    def _transport(self) -> Transport:
        if self._t is None:
            self._t = Transport(self._http_client, timeout_s=self._timeout_s)
        return self._t

    def close(self) -> None:
        if self._t is not None:
            self._t.close()
            self._t = None

    def __enter__(self) -> "PastebinClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _post(self, endpoint: str, parameters: Parameters) -> httpx.Response:
        req = build_request(self._state.base_url, endpoint, parameters)
        if self._debug:
            logger.debug("REQUEST:\n%s\n====", dump_request(req))
        r = self._transport().send(req)
        logger.debug("POST %s -> %s", endpoint, r.status_code)
        return r

    def _post_checked(self, endpoint: str, parameters: Parameters) -> str:
        r = self._post(endpoint, parameters)
        if r.status_code != 200:
            option = parameters.get("api_option", endpoint)
            raise ApiError(r.status_code, f"{option} failed with {r.status_code} {r.reason_phrase}: {r.text[:1000]}",
                           r.text, r.reason_phrase)
        return r.text

    def _require_session(self) -> str:
        if not key_ok(self._state.session_key):
            raise NotLoggedIn("you are not logged in, login first")
        return self._state.session_key

    # --- API methods ---
    def login(self, username: str | None = None, password: str | None = None) -> str:
        """Exchange username and password for a session key.

        On success the key is stored on the client and the password is
        cleared. Returns the session key.
        """
        username = self._state.username if username is None else username
        password = self._password if password is None else password
        if not username or not password:
            raise MissingCredentials("login not possible, username and password not set in client")

        parameters: Parameters = {
            "api_dev_key": self._state.dev_key,
            "api_user_name": username,
            "api_user_password": password,
        }
        r = self._post(LOGIN_ENDPOINT, parameters)
        body = r.text
        # errors come back as 200 with a plain-text message
        if r.status_code == 200 and key_ok(body):
            self._state.username = username
            self._state.session_key = body
            self._password = ""
            logger.debug("logged in as %s", username)
            return body
        raise LoginFailed(r.status_code, f"login failed {r.status_code} {r.reason_phrase} '{body}'",
                          body, r.reason_phrase)

    def new_paste_from_file(
            self,
            content: str,
            name: str,
            *,
            visibility: Visibility | str | None = None,
            expire: str | None = None,
            paste_format: str | None = None,
    ) -> str:
        """Post content as a new paste named `name`.

        Posts as the logged-in user when a session key is set, as a guest
        otherwise. Returns the response body, normally the paste url. The body
        is not checked further: the API also reports some errors as a 200 with
        a "Bad API request, ..." text.
        """
        expire_code = check_expire(expire) if expire is not None else self._state.expire
        paste_visibility = check_visibility(visibility) if visibility is not None else self._state.visibility

        parameters: Parameters = {
            "api_dev_key": self._state.dev_key,
            "api_option": "paste",
            "api_paste_name": name,
            "api_paste_code": content,
            "api_paste_expire_date": expire_code,
            "api_paste_private": paste_visibility.code,
        }
        if paste_format:
            parameters["api_paste_format"] = paste_format
        if self._state.session_key:
            parameters["api_user_key"] = self._state.session_key
        return self._post_checked(POST_ENDPOINT, parameters)

    def delete_paste(self, paste_key: str) -> str:
        session_key = self._require_session()
        parameters: Parameters = {
            "api_user_key": session_key,
            "api_paste_key": paste_key,
            "api_dev_key": self._state.dev_key,
            "api_option": "delete",
        }
        return self._post_checked(POST_ENDPOINT, parameters)

    def list_pastes(self, limit: int = DEFAULT_LIST_LIMIT) -> str:
        """Return the raw listing payload for the logged-in user."""
        session_key = self._require_session()
        parameters: Parameters = {
            "api_dev_key": self._state.dev_key,
            "api_user_key": session_key,
            "api_results_limit": str(int(limit)),
            "api_option": "list",
        }
        return self._post_checked(POST_ENDPOINT, parameters)
