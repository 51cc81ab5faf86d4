"""HTTP client used by the form controllers."""
import logging
import os

import requests

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10


class ApiError(Exception):
    def __init__(self, status_code, message):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def _error_message(response):
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason or "Request failed"
    if isinstance(body, dict):
        return body.get("message") or body.get("error") or "Request failed"
    return str(body)


class ApiClient:
    def __init__(self, base_url=None, session=None, timeout=DEFAULT_TIMEOUT):
        self.base_url = (base_url or os.getenv("PRESSURE_API_URL", "http://127.0.0.1:5000")).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(self, method, path, json=None, params=None):
        url = f"{self.base_url}/{path.lstrip('/')}"
        try:
            response = self.session.request(method, url, json=json, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error("%s %s failed: %s", method, url, e)
            raise ApiError(None, str(e)) from e

        if not response.ok:
            message = _error_message(response)
            logger.warning("%s %s -> %s %s", method, url, response.status_code, message)
            raise ApiError(response.status_code, message)

        if not response.content:
            return None
        return response.json()

    def get(self, path, params=None):
        return self._request("GET", path, params=params)

    def post(self, path, json=None):
        return self._request("POST", path, json=json)

    def patch(self, path, json=None):
        return self._request("PATCH", path, json=json)

    def delete(self, path):
        return self._request("DELETE", path)
