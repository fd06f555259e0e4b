import httpx
from typing import Any, Dict, Optional
from urllib.parse import urlencode

from school_connect_client import config
from school_connect_client.token_storage import TokenStorage
from school_connect_client.utils.logger import logger

BODY_METHODS = ("POST", "PUT", "PATCH")


class APIError(Exception):
    """Raised when the server answers with a non-2xx status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _with_query(endpoint: str, **params: Any) -> str:
    query = {key: value for key, value in params.items() if value is not None}
    if not query:
        return endpoint
    return f"{endpoint}?{urlencode(query)}"


class APIService:
    """Thin async wrapper over the School Connect REST API."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        storage: Optional[TokenStorage] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or config.API_BASE_URL).rstrip("/")
        self.storage = storage or TokenStorage(config.STORAGE_PATH)
        self.transport = transport
        logger.info(f"APIService initialized with base_url: {self.base_url}")

    def get_token(self) -> Optional[str]:
        try:
            return self.storage.get_item(config.TOKEN_KEY)
        except Exception as e:
            logger.error(f"Error getting token: {e}")
            return None

    async def _send(self, endpoint: str, method: str = "GET", data: Optional[Dict[str, Any]] = None) -> httpx.Response:
        method = method.upper()
        headers = {"Content-Type": "application/json"}
        token = self.get_token()
        if token:
            headers["Authorization"] = f"Bearer {token}"

        kwargs: Dict[str, Any] = {"headers": headers}
        if data is not None and method in BODY_METHODS:
            kwargs["json"] = data

        url = f"{self.base_url}{endpoint}"
        timeout = httpx.Timeout(30.0, connect=10.0)
        try:
            async with httpx.AsyncClient(timeout=timeout, transport=self.transport) as client:
                response = await client.request(method, url, **kwargs)
        except httpx.RequestError as e:
            logger.error(f"API Error ({method} {endpoint}): {type(e).__name__}: {e}", exc_info=True)
            raise

        if not response.is_success:
            try:
                error_data = response.json()
            except ValueError:
                error_data = {}
            message = None
            if isinstance(error_data, dict):
                message = error_data.get("message")
            error = APIError(
                message or f"API request failed with status {response.status_code}",
                response.status_code,
            )
            logger.error(f"API Error ({method} {endpoint}): {error.message}")
            raise error

        return response

    async def api_request(self, endpoint: str, method: str = "GET", data: Optional[Dict[str, Any]] = None) -> Any:
        """
        Call `endpoint` relative to the base URL.

        Returns:
            The decoded JSON body, or {"success": True} when the response
            carries no JSON.

        Raises:
            APIError: the server answered with a non-2xx status.
        """
        response = await self._send(endpoint, method, data)
        if "application/json" in response.headers.get("content-type", ""):
            return response.json()
        return {"success": True}

    def _store_session(self, response: httpx.Response) -> None:
        token = response.cookies.get(config.SESSION_COOKIE_NAME)
        if token:
            self.storage.set_item(config.TOKEN_KEY, token)
        else:
            logger.warning("Login response did not carry a session cookie")

    # Authentication

    async def login(self, email: str, password: str) -> Dict[str, Any]:
        response = await self._send("/auth/login", "POST", {"email": email, "password": password})
        self._store_session(response)
        return response.json()

    async def register(self, name: str, email: str, password: str, role: Optional[str] = None) -> Dict[str, Any]:
        payload = {"name": name, "email": email, "password": password}
        if role:
            payload["role"] = role
        response = await self._send("/auth/register", "POST", payload)
        self._store_session(response)
        return response.json()

    async def logout(self) -> None:
        """Invalidate the server session; the local token is dropped even if that fails."""
        try:
            await self.api_request("/auth/logout", "POST")
        except Exception as e:
            logger.warning(f"Server logout failed, clearing local session anyway: {e}")
        finally:
            self.storage.remove_item(config.TOKEN_KEY)

    async def get_user_data(self) -> Dict[str, Any]:
        return await self.api_request("/user")

    # User profile

    async def update_profile(self, user_id: int, profile_data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.api_request(f"/users/{user_id}", "PUT", profile_data)

    async def change_password(self, user_id: int, current_password: str, new_password: str) -> Dict[str, Any]:
        return await self.api_request(f"/users/{user_id}/password", "PUT", {
            "currentPassword": current_password,
            "newPassword": new_password,
        })

    # Students

    async def get_students_by_parent(self, parent_id: int):
        return await self.api_request(f"/parents/{parent_id}/students")

    async def get_teacher_students(self, teacher_id: int):
        return await self.api_request(f"/teachers/{teacher_id}/students")

    async def get_student_details(self, student_id: int):
        return await self.api_request(f"/students/{student_id}")

    async def add_student_note(self, note_data: Dict[str, Any]):
        return await self.api_request("/student-notes", "POST", note_data)

    # Attendance

    async def get_student_attendance(self, student_id: int):
        return await self.api_request(f"/students/{student_id}/attendance")

    async def get_attendance_data(self, teacher_id: int, date: Optional[str] = None, student_id: Optional[int] = None):
        return await self.api_request(_with_query(
            "/attendance", teacherId=teacher_id, date=date, studentId=student_id,
        ))

    async def mark_attendance(self, attendance_data: Dict[str, Any]):
        return await self.api_request("/attendance", "POST", attendance_data)

    # Grades

    async def get_student_grades(self, student_id: int):
        return await self.api_request(f"/students/{student_id}/grades")

    async def get_grades(self, teacher_id: int, student_id: Optional[int] = None, assignment_id: Optional[int] = None):
        return await self.api_request(_with_query(
            "/grades", teacherId=teacher_id, studentId=student_id, assignmentId=assignment_id,
        ))

    async def add_grade(self, grade_data: Dict[str, Any]):
        return await self.api_request("/grades", "POST", grade_data)

    async def update_grade(self, grade_id: int, grade_data: Dict[str, Any]):
        return await self.api_request(f"/grades/{grade_id}", "PUT", grade_data)

    # Assignments

    async def get_student_assignments(self, student_id: int):
        return await self.api_request(f"/students/{student_id}/assignments")

    async def get_assignments(self, teacher_id: int):
        return await self.api_request(_with_query("/assignments", teacherId=teacher_id))

    async def get_upcoming_assignments(self, teacher_id: int):
        return await self.api_request(_with_query("/assignments/upcoming", teacherId=teacher_id))

    async def create_assignment(self, assignment_data: Dict[str, Any]):
        return await self.api_request("/assignments", "POST", assignment_data)

    async def update_assignment(self, assignment_id: int, assignment_data: Dict[str, Any]):
        return await self.api_request(f"/assignments/{assignment_id}", "PUT", assignment_data)

    async def delete_assignment(self, assignment_id: int):
        return await self.api_request(f"/assignments/{assignment_id}", "DELETE")

    async def get_submissions(self, assignment_id: int):
        return await self.api_request(f"/assignments/{assignment_id}/submissions")

    # Messaging

    async def get_contacts(self, user_id: int):
        return await self.api_request(_with_query("/messages/contacts", userId=user_id))

    async def get_messages(self, chat_id: int):
        return await self.api_request(_with_query("/messages", chatId=chat_id))

    async def get_recent_messages(self, user_id: int):
        return await self.api_request(_with_query("/messages/recent", userId=user_id))

    async def send_message(self, message_data: Dict[str, Any]):
        return await self.api_request("/messages", "POST", message_data)

    async def mark_message_as_read(self, message_id: int):
        return await self.api_request(f"/messages/{message_id}/read", "PUT")

    # Calendar

    async def get_events(self, user_id: int, role: Optional[str] = None):
        return await self.api_request(_with_query("/events", userId=user_id, role=role))

    # News and announcements

    async def get_school_news(self, category: Optional[str] = None):
        return await self.api_request(_with_query("/news", category=category))

    async def get_recent_announcements(self):
        return await self.api_request("/news/recent")

    async def create_announcement(self, announcement_data: Dict[str, Any]):
        return await self.api_request("/news", "POST", announcement_data)

    async def update_announcement(self, announcement_id: int, announcement_data: Dict[str, Any]):
        return await self.api_request(f"/news/{announcement_id}", "PUT", announcement_data)

    async def delete_announcement(self, announcement_id: int):
        return await self.api_request(f"/news/{announcement_id}", "DELETE")

    # Resources

    async def get_resources(self, user_id: int, resource_type: Optional[str] = None, tag: Optional[str] = None):
        return await self.api_request(_with_query("/resources", userId=user_id, type=resource_type, tag=tag))

    async def add_resource(self, resource_data: Dict[str, Any]):
        return await self.api_request("/resources", "POST", resource_data)

    async def request_resource(self, request_data: Dict[str, Any]):
        return await self.api_request("/resources/request", "POST", request_data)

    # Notifications

    async def get_notifications(self, user_id: int):
        return await self.api_request(_with_query("/notifications", userId=user_id))

    async def mark_notification_as_read(self, notification_id: int):
        return await self.api_request(f"/notifications/{notification_id}/read", "PUT")

    async def mark_all_notifications_as_read(self, user_id: int):
        return await self.api_request(_with_query("/notifications/read-all", userId=user_id), "PUT")

    async def delete_notification(self, notification_id: int):
        return await self.api_request(f"/notifications/{notification_id}", "DELETE")

    async def delete_all_notifications(self, user_id: int):
        return await self.api_request(_with_query("/notifications", userId=user_id), "DELETE")
