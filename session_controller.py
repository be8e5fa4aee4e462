# session_controller.py
# Who is logged in, their points/tasks progress, and the display preferences.
# The store is only ever written from here, so views never touch it directly.

import logging

from exceptions import RegistrationError, ValidationError
from locales import LANGUAGES, DEFAULT_LANGUAGE, translate
from models import new_user, is_session_user
from session_store import USER_KEY, THEME_KEY, LANGUAGE_KEY

logger = logging.getLogger(__name__)

PAGES = (
    'home', 'welcome', 'login', 'register', 'map', 'plant', 'profile', 'about',
    'contact', 'tasks', 'games', 'games-questions', 'games-interactive',
)
PROTECTED_PAGES = frozenset({'welcome', 'profile'})

THEMES = ('dark', 'light')
DEFAULT_THEME = 'dark'

TOAST_DURATION_MS = 3000


def _check_count(name, value):
    # bool is an int subclass but never a valid count
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{name} must be a non-negative integer, got {value!r}")


class SessionController:
    def __init__(self, store, gateway=None, min_password_length=6):
        self.store = store
        self.gateway = gateway
        self.min_password_length = min_password_length
        self.page = 'home'
        self.notifications = []

        theme = store.load(THEME_KEY)
        self.theme = theme if theme in THEMES else DEFAULT_THEME
        language = store.load(LANGUAGE_KEY)
        self.language = language if language in LANGUAGES else DEFAULT_LANGUAGE

        user = store.load_json(USER_KEY)
        if user is not None and not is_session_user(user):
            logger.warning("Discarding malformed user mirror")
            user = None
        self.user = user
        self._sync_user()

    @property
    def authenticated(self):
        return self.user is not None

    def _sync_user(self):
        # keeps "user in memory <=> mirror in store"
        if self.user is None:
            self.store.remove(USER_KEY)
        else:
            self.store.save_json(USER_KEY, self.user)

    def _activate(self, user):
        self.user = user
        self._sync_user()
        self.page = 'welcome'
        return user

    def login(self, email, password):
        # Login is simulated: the mirror holds no credential to check the
        # password against, so a stored record is matched on email alone.
        if not isinstance(email, str) or not email:
            raise ValueError(f"email must be a non-empty string, got {email!r}")
        saved = self.store.load_json(USER_KEY)
        if is_session_user(saved) and saved['email'] == email:
            logger.info("Reactivated stored user %s", email)
            return self._activate(saved)
        return self._activate(new_user(email.split('@')[0], email))

    def register(self, name, email, password, confirm_password=None):
        if not all(isinstance(value, str) and value for value in (name, email, password)):
            raise ValidationError(translate(self.language, 'missing_fields'))
        if confirm_password is not None and password != confirm_password:
            raise ValidationError(translate(self.language, 'password_mismatch'))
        if len(password) < self.min_password_length:
            raise ValidationError(translate(self.language, 'password_too_short',
                                            min_length=self.min_password_length))
        if self.gateway is None:
            raise RegistrationError(translate(self.language, 'server_error'), status=500)

        result = self.gateway.register(name, email, password, language=self.language)
        if not result.get('success'):
            message = result.get('message') or translate(self.language, 'registration_failed')
            logger.info("Registration refused for %s: %s", email, message)
            raise RegistrationError(message, status=result.get('status', 400))
        return self._activate(new_user(name, email))

    def logout(self):
        self.user = None
        self._sync_user()
        self.page = 'home'

    def award_points(self, points, tasks_completed=0):
        _check_count('points', points)
        _check_count('tasks_completed', tasks_completed)
        if self.user is None:
            return None

        self.user = dict(self.user,
                         points=self.user['points'] + points,
                         tasksCompleted=self.user['tasksCompleted'] + tasks_completed)
        self._sync_user()

        if points > 0:
            if tasks_completed > 0:
                description = translate(self.language, 'tasks_completed', count=tasks_completed)
            else:
                description = translate(self.language, 'points_added')
            self.notifications.append({
                'type': 'success',
                'title': translate(self.language, 'points_earned', points=points),
                'description': description,
                'duration': TOAST_DURATION_MS,
            })
        return self.user

    def navigate(self, page):
        if page not in PAGES:
            raise ValueError(f"unknown page {page!r}")
        if page in PROTECTED_PAGES and self.user is None:
            page = 'login'
        self.page = page
        return page

    def toggle_theme(self):
        self.theme = 'light' if self.theme == 'dark' else 'dark'
        self.store.save(THEME_KEY, self.theme)
        return self.theme

    def set_language(self, lang):
        if lang not in LANGUAGES:
            raise ValueError(f"unsupported language {lang!r}")
        self.language = lang
        self.store.save(LANGUAGE_KEY, lang)
        return lang

    def snapshot(self):
        return {
            'authenticated': self.authenticated,
            'user': self.user,
            'page': self.page,
            'theme': self.theme,
            'language': self.language,
            'notifications': list(self.notifications),
        }
