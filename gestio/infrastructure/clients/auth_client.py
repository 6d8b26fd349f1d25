"""HTTP implementation of AuthProvider over a GoTrue endpoint."""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import httpx
import structlog

from gestio.core.config import settings
from gestio.domain.entities import Identity, Session
from gestio.domain.exceptions import AuthException
from gestio.domain.interfaces import AuthProvider

logger = structlog.get_logger(__name__)


class HttpAuthProvider(AuthProvider):
    """
    Email/password authentication against the hosted auth service.

    Holds at most one session. `get_user()` answers from that session
    without a network call; `fetch_user()` validates a token remotely.
    """

    AUTH_PATH = "/auth/v1"

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        session: Session | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = (base_url or settings.supabase_url).rstrip("/")
        self._api_key = api_key if api_key is not None else settings.supabase_anon_key
        self._timeout = timeout if timeout is not None else settings.store_timeout
        self._session = session
        self._transport = transport

    async def get_session(self) -> Optional[Session]:
        return self._session

    async def get_user(self) -> Optional[Identity]:
        return self._session.user if self._session else None

    async def sign_in(self, email: str, password: str) -> Session:
        data = await self._post(
            "/token",
            params={"grant_type": "password"},
            json={"email": email, "password": password},
        )
        self._session = self._parse_session(data)
        logger.info("signed_in", user_id=self._session.user.id)
        return self._session

    async def sign_up(
        self,
        email: str,
        password: str,
        full_name: Optional[str] = None,
    ) -> Identity:
        data = await self._post(
            "/signup",
            json={
                "email": email,
                "password": password,
                "data": {"full_name": full_name} if full_name else {},
            },
        )
        # Projects with email confirmation return the bare user; others a session
        if data.get("access_token"):
            self._session = self._parse_session(data)
            user = self._session.user
        else:
            user = self._parse_user(data.get("user") or data)
        logger.info("signed_up", user_id=user.id)
        return user

    async def sign_out(self) -> None:
        session, self._session = self._session, None
        if session is None:
            return
        await self._post("/logout", token=session.access_token)
        logger.info("signed_out", user_id=session.user.id)

    async def fetch_user(self, access_token: str) -> Identity:
        """
        Resolve an access token to its user and adopt it as the session.

        Raises:
            AuthException: If the token is invalid or expired
        """
        data = await self._send("GET", "/user", token=access_token)
        user = self._parse_user(data)
        self._session = Session(access_token=access_token, user=user)
        return user

    async def _post(
        self,
        path: str,
        params: Optional[Dict[str, str]] = None,
        json: Optional[Dict[str, Any]] = None,
        token: Optional[str] = None,
    ) -> Dict[str, Any]:
        return await self._send("POST", path, params=params, json=json, token=token)

    async def _send(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, str]] = None,
        json: Optional[Dict[str, Any]] = None,
        token: Optional[str] = None,
    ) -> Dict[str, Any]:
        url = f"{self._base_url}{self.AUTH_PATH}{path}"
        headers = {
            "apikey": self._api_key,
            "Authorization": f"Bearer {token or self._api_key}",
        }

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.request(
                    method, url, params=params, json=json, headers=headers
                )
        except httpx.HTTPError as e:
            logger.error("auth_unreachable", path=path, error=str(e))
            raise AuthException(f"Authentication service unreachable: {e}")

        if response.status_code >= 400:
            message = self._error_message(response)
            logger.warning(
                "auth_request_failed",
                path=path,
                status_code=response.status_code,
                error=message,
            )
            raise AuthException(message, status_code=response.status_code)

        if not response.content:
            return {}
        return response.json()

    def _parse_session(self, data: Dict[str, Any]) -> Session:
        try:
            expires_at = None
            if data.get("expires_at"):
                expires_at = datetime.fromtimestamp(int(data["expires_at"]), tz=timezone.utc)
            elif data.get("expires_in"):
                expires_at = datetime.now(timezone.utc) + timedelta(seconds=int(data["expires_in"]))

            return Session(
                access_token=data["access_token"],
                refresh_token=data.get("refresh_token"),
                token_type=data.get("token_type", "bearer"),
                expires_at=expires_at,
                user=self._parse_user(data["user"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise AuthException(f"Malformed session response: {e}")

    @staticmethod
    def _parse_user(data: Dict[str, Any]) -> Identity:
        if not data.get("id"):
            raise AuthException("Malformed user response: missing id")
        metadata = data.get("user_metadata") or {}
        return Identity(
            id=str(data["id"]),
            email=data.get("email"),
            full_name=metadata.get("full_name"),
        )

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            for key in ("error_description", "msg", "message", "error"):
                if body.get(key):
                    return str(body[key])
        return f"Authentication error ({response.status_code})"
