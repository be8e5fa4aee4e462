# gateway.py
# Clients of the registration endpoint, used by the session controller

import logging

import requests

import config
from locales import translate
from registry import register_user

logger = logging.getLogger(__name__)


class HttpRegistrationGateway:
    """Calls ``POST /api/register`` over HTTP. Not retried.

    Results are ``{"success", "message", "status"}``; ``status`` is the HTTP
    status of the reply, or 502 when no usable reply came back. ``language``
    picks the text of locally generated errors and can be overridden per call.
    """

    def __init__(self, url=config.REGISTRATION_API_URL, timeout=config.REQUEST_TIMEOUT, language='az'):
        self.url = url
        self.timeout = timeout
        self.language = language

    def _server_error(self, language):
        return {'success': False, 'message': translate(language or self.language, 'server_error'), 'status': 502}

    def register(self, name, email, password, language=None):
        payload = {'name': name, 'email': email, 'password': password}
        try:
            r = requests.post(self.url, json=payload, timeout=self.timeout)
            data = r.json()
        except (requests.RequestException, ValueError) as e:
            logger.error("Registration request to %s failed: %s", self.url, e)
            return self._server_error(language)
        if not isinstance(data, dict):
            logger.error("Unexpected registration response from %s: %r", self.url, data)
            return self._server_error(language)
        # 4xx/5xx bodies carry the same {success, message} shape
        return {'success': bool(data.get('success')), 'message': data.get('message', ''),
                'status': r.status_code}


class LocalRegistrationGateway:
    """In-process gateway that writes straight to the users collection."""

    def __init__(self, users_collection):
        self.users_collection = users_collection

    def register(self, name, email, password, language=None):
        # register_user answers with fixed English messages, like the HTTP endpoint
        body, status = register_user(
            self.users_collection,
            {'name': name, 'email': email, 'password': password},
        )
        return dict(body, status=status)
