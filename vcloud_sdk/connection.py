"""
vCloud HTTP Connection

All traffic to the vCloud API goes through Connection, a thin layer over a
requests.Session that:
- authenticates once and carries the x-vcloud-authorization token
- sends the versioned Accept header
- wraps XML response bodies with vcloud_sdk.models

HTTP errors are raised by response.raise_for_status() and are never caught
or translated here.
"""

import logging
import time
from typing import Optional

import requests

from .config import Settings
from .models import RequestBody, wrap_document

logger = logging.getLogger(__name__)

AUTH_HEADER = "x-vcloud-authorization"


class Connection:
    """Authenticated session against one vCloud Director endpoint."""

    def __init__(self, url: str, username: str, password: str, org_name: str,
                 settings: Optional[Settings] = None):
        """
        Args:
            url: Base URL of the vCloud Director cell (e.g. https://vcd.example.com)
            username: Organization user name
            password: User password
            org_name: Organization to log in to
            settings: SDK settings (verify_ssl, api_version, request_timeout)
        """
        self.url = url.rstrip("/")
        self.username = username
        self.password = password
        self.org_name = org_name
        self.settings = settings or Settings()

        self.session = requests.Session()
        self.session.verify = self.settings.verify_ssl

        if not self.settings.verify_ssl:
            import urllib3
            urllib3.disable_warnings()

    @property
    def accept_header(self) -> str:
        return f"application/*+xml;version={self.settings.api_version}"

    def login(self):
        """
        Open an API session.

        Returns:
            SessionDocument: The wrapped session, carrying links to the orgs

        Raises:
            requests.HTTPError: If the credentials are rejected
        """
        url = f"{self.url}/api/sessions"
        logger.info(f"Logging in to {self.url} as {self.username}@{self.org_name}")
        response = self.session.post(
            url,
            auth=(f"{self.username}@{self.org_name}", self.password),
            headers={"Accept": self.accept_header},
            timeout=self.settings.request_timeout,
        )
        response.raise_for_status()

        token = response.headers.get(AUTH_HEADER)
        if token:
            self.session.headers[AUTH_HEADER] = token
        return wrap_document(response.content)

    def close(self):
        self.session.close()

    def get(self, target):
        """Fetch the current representation of an href, link or wrapper."""
        return self.request("GET", target)

    def post(self, target, data=None, content_type: Optional[str] = None):
        return self.request("POST", target, data, content_type)

    def put(self, target, data=None, content_type: Optional[str] = None):
        return self.request("PUT", target, data, content_type)

    def delete(self, target):
        return self.request("DELETE", target)

    def request(self, method: str, target, data=None, content_type: Optional[str] = None):
        """
        Issue one request and wrap the XML response.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            target: Absolute or API-relative href, or anything with an href attribute
            data: Request body (bytes/str) or a RequestBody carrying its media type
            content_type: Content-Type header; taken from a RequestBody when omitted

        Returns:
            Wrapper for the response document, or None for an empty body
        """
        if isinstance(data, RequestBody):
            content_type = content_type or data.content_type
            data = data.data

        url = self.url_for(target)
        headers = {"Accept": self.accept_header}
        if content_type:
            headers["Content-Type"] = content_type

        start_time = time.time()
        response = self.session.request(
            method.upper(),
            url,
            data=data,
            headers=headers,
            timeout=self.settings.request_timeout,
        )
        response_time_ms = int((time.time() - start_time) * 1000)
        logger.debug(f"{method.upper()} {url} -> HTTP {response.status_code} ({response_time_ms}ms)")

        response.raise_for_status()
        return wrap_document(response.content)

    def url_for(self, target) -> str:
        href = getattr(target, "href", target)
        if not href:
            raise ValueError(f"No href to request for {target!r}")
        if href.startswith("/"):
            return f"{self.url}{href}"
        return href
