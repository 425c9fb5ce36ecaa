"""
HTTP client for the HRD API
"""
import logging
from typing import Any, Dict, Optional
import requests

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:3000/api"


class APIError(Exception):
    """
    Error raised by HRDClient

    status_code is None when the server could not be reached at all.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    @property
    def is_network_error(self) -> bool:
        return self.status_code is None


class HRDClient:
    """Thin wrapper over the REST endpoints"""

    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: float = 10):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})

    def _request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        logger.info(f"API Request: {method} {path}")

        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error(f"API Error: {path} {e}")
            raise APIError(f"Unable to connect to server at {self.base_url}", status_code=None) from e

        logger.info(f"API Response: {path} - Status: {response.status_code}")

        try:
            body = response.json()
        except ValueError:
            body = {}

        if not response.ok:
            message = body.get("message") if isinstance(body, dict) else None
            raise APIError(message or f"Request failed with status {response.status_code}",
                           status_code=response.status_code)
        return body

    # ==================== AUTH ====================

    def login(self, username: str, password: str) -> Dict[str, Any]:
        """Log in and send the returned bearer token on every later request"""
        body = self._request("POST", "/auth/login", json={"username": username, "password": password})
        token = body.get("access_token")
        if token:
            self.session.headers["Authorization"] = f"Bearer {token}"
        return body

    def get_current_user(self) -> Dict[str, Any]:
        return self._request("GET", "/auth/me")

    # ==================== DIVISIONS ====================

    def get_divisions(self) -> Dict[str, Any]:
        return self._request("GET", "/divisions")

    def get_division(self, division_id: int) -> Dict[str, Any]:
        return self._request("GET", f"/divisions/{division_id}")

    def create_division(self, division_data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/divisions", json=division_data)

    def update_division(self, division_id: int, division_data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"/divisions/{division_id}", json=division_data)

    def delete_division(self, division_id: int) -> Dict[str, Any]:
        return self._request("DELETE", f"/divisions/{division_id}")

    # ==================== EMPLOYEES ====================

    def get_employees(self, division_id: Optional[int] = None) -> Dict[str, Any]:
        params = {"division": division_id} if division_id is not None else None
        return self._request("GET", "/employees", params=params)

    def get_employees_by_division(self, division_id: int) -> Dict[str, Any]:
        return self._request("GET", f"/employees/division/{division_id}")

    def get_employee(self, employee_id: int) -> Dict[str, Any]:
        return self._request("GET", f"/employees/{employee_id}")

    def create_employee(self, employee_data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/employees", json=employee_data)

    def update_employee(self, employee_id: int, employee_data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"/employees/{employee_id}", json=employee_data)

    def delete_employee(self, employee_id: int) -> Dict[str, Any]:
        return self._request("DELETE", f"/employees/{employee_id}")

    def update_employee_status(self, employee_id: int, status: str) -> Dict[str, Any]:
        return self._request("PUT", f"/employees/{employee_id}/status", json={"status": status})

    # ==================== ANNOUNCEMENTS & STATISTICS ====================

    def get_contract_announcements(self) -> Dict[str, Any]:
        return self._request("GET", "/announcements/contracts")

    def get_dashboard_statistics(self) -> Dict[str, Any]:
        return self._request("GET", "/statistics/dashboard")

    # ==================== USERS ====================

    def update_username(self, user_id: int, new_username: str) -> Dict[str, Any]:
        return self._request("PUT", "/users/update-username",
                             json={"userId": user_id, "newUsername": new_username})

    def update_password(self, user_id: int, old_password: str, new_password: str) -> Dict[str, Any]:
        return self._request("PUT", "/users/update-password",
                             json={"userId": user_id, "oldPassword": old_password, "newPassword": new_password})
