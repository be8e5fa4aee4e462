# session_store.py
# Durable per-browser mirror of the user record and the display preferences

import json
import logging

logger = logging.getLogger(__name__)

USER_KEY = 'ecoUser'
THEME_KEY = 'theme'
LANGUAGE_KEY = 'language'


class LocalSessionStore:
    """Text key/value storage over any mutable mapping.

    When served, the backend is ``flask.session`` (a signed cookie kept by the
    browser); standalone, a plain dict.
    """

    def __init__(self, backend=None):
        self.backend = backend if backend is not None else {}

    def save(self, key, value):
        if not isinstance(value, str):
            raise TypeError(f"value for {key!r} must be text, got {type(value).__name__}")
        self.backend[key] = value

    def load(self, key):
        return self.backend.get(key)

    def remove(self, key):
        self.backend.pop(key, None)

    def save_json(self, key, value):
        self.save(key, json.dumps(value, ensure_ascii=False))

    def load_json(self, key):
        raw = self.load(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            logger.warning("Ignoring corrupt %s mirror in session store", key)
            return None
