"""
API client holding one signed-in session: the bearer token, the cached user
and the cached notification list.

The session is filled by login/register/restore and emptied by logout. While
it holds a token, every request carries it. Failures surface immediately as
ApiError with the server's message; nothing is retried.
"""
import logging
from typing import Any, BinaryIO, Optional
import httpx
from hospital.exceptions import ApiError
from hospital.auth import SECTION_ROLES

logger = logging.getLogger(__name__)


class HospitalSession:
    def __init__(self, http: httpx.Client):
        self.http = http
        self.token: Optional[str] = None
        self.user: Optional[dict] = None
        self.notifications: list[dict] = []

    @classmethod
    def connect(cls, base_url: str, timeout: float = 10.0) -> "HospitalSession":
        return cls(httpx.Client(base_url=base_url, timeout=timeout))

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None and self.user is not None

    @property
    def unread_notifications(self) -> int:
        return sum(1 for n in self.notifications if not n.get("read"))

    def can_access(self, section: str) -> bool:
        """
        Navigation hint only: whether the signed-in role may open a section.
        The server enforces the same rule regardless of this answer.
        """
        if not self.is_authenticated:
            return False
        allowed = SECTION_ROLES.get(section)
        return not allowed or self.user["role"] in allowed

    # Session lifecycle

    def login(self, email: str, password: str) -> dict:
        data = self._request("POST", "/api/auth/login", json={"email": email, "password": password})
        self._start(data["token"], data["user"])
        self.refresh_notifications()
        return self.user

    def register(self, name: str, email: str, password: str,
                 role: Optional[str] = None, phone: Optional[str] = None) -> dict:
        body = {"name": name, "email": email, "password": password}
        if role is not None:
            body["role"] = role
        if phone is not None:
            body["phone"] = phone
        data = self._request("POST", "/api/auth/register", json=body)
        self._start(data["token"], data["user"])
        self.refresh_notifications()
        return self.user

    def restore(self, token: str) -> bool:
        """Adopt a previously saved token. Clears the session if the server rejects it."""
        self.token = token
        try:
            self.user = self._request("GET", "/api/auth/me")
        except ApiError:
            self.logout()
            return False
        self.refresh_notifications()
        return True

    def logout(self) -> None:
        self.token = None
        self.user = None
        self.notifications = []

    def _start(self, token: str, user: dict) -> None:
        self.token = token
        self.user = user

    # Profile

    def update_profile(self, name: Optional[str] = None, phone: Optional[str] = None) -> dict:
        body = {k: v for k, v in (("name", name), ("phone", phone)) if v is not None}
        self.user = self._request("PUT", "/api/auth/profile", json=body)["user"]
        return self.user

    def upload_avatar(self, filename: str, content: BinaryIO, content_type: str) -> dict:
        data = self._request(
            "POST", "/api/upload/avatar", files={"avatar": (filename, content, content_type)}
        )
        self.user = data["user"]
        return self.user

    # Notifications

    def refresh_notifications(self) -> list[dict]:
        try:
            self.notifications = self._request("GET", "/api/notifications")
        except ApiError as e:
            # Keep the previous cache; the caller still gets the list back
            logger.warning(f"Could not load notifications: {e.message}")
        return self.notifications

    def mark_notification_read(self, notification_id: str) -> None:
        self._request("PUT", f"/api/notifications/{notification_id}/read")
        self.notifications = [
            {**n, "read": True} if n["id"] == notification_id else n
            for n in self.notifications
        ]

    # Resources

    def list_records(self, resource: str) -> list[dict]:
        return self._request("GET", f"/api/{resource}")

    def create_record(self, resource: str, fields: dict) -> dict:
        return self._request("POST", f"/api/{resource}", json=fields)

    def update_record(self, resource: str, record_id: str, fields: dict) -> dict:
        return self._request("PUT", f"/api/{resource}/{record_id}", json=fields)

    def delete_record(self, resource: str, record_id: str) -> dict:
        return self._request("DELETE", f"/api/{resource}/{record_id}")

    def report(self, period: str) -> dict:
        return self._request("GET", f"/api/reports/{period}")

    def dashboard_stats(self) -> dict:
        return self._request("GET", "/api/dashboard/stats")

    def _request(self, method: str, path: str, **kwargs) -> Any:
        headers = kwargs.pop("headers", {})
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        response = self.http.request(method, path, headers=headers, **kwargs)
        if response.is_error:
            raise ApiError(response.status_code, self._error_message(response))
        return response.json()

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            detail = response.json().get("detail")
        except ValueError:
            detail = None
        return detail if isinstance(detail, str) else f"Request failed with status {response.status_code}"
