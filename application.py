from flask import Flask, Blueprint, current_app, request, jsonify, session
from pymongo import MongoClient
from datetime import timedelta
import logging
import os

import config
from chatbot import reply
from exceptions import RegistrationError, InvalidImageError
from gateway import LocalRegistrationGateway
from locales import LANGUAGES, TRANSLATIONS, translate
from plant import identify, ALLOWED_EXTENSIONS
from registry import register_user
from session_controller import SessionController
from session_store import LocalSessionStore

logger = logging.getLogger(__name__)

eco = Blueprint('eco', __name__)


def get_users_collection():
    app = current_app
    collection = app.config.get('USERS_COLLECTION')
    if collection is None:
        # MongoClient connects lazily, so nothing touches the network until the first query
        client = MongoClient(app.config['MONGO_URI'], serverSelectionTimeoutMS=5000)
        collection = client[app.config['MONGO_DB']]["users"]
        app.config['USERS_COLLECTION'] = collection
        logger.info("Using MongoDB database %s", app.config['MONGO_DB'])
    return collection


def get_controller(gateway=None):
    return SessionController(
        LocalSessionStore(session),
        gateway=gateway,
        min_password_length=current_app.config['MIN_PASSWORD_LENGTH'],
    )


def failure(message, status):
    return jsonify({'success': False, 'message': message}), status


def json_body():
    # anything but a JSON object is treated as an empty form
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


@eco.before_app_request
def keep_session():
    # the session cookie is the browser's durable store, so it must outlive the tab
    session.permanent = True


# registration gateway: one insert into the users collection
@eco.route("/api/register", methods=['POST'])
def api_register():
    body, status = register_user(get_users_collection(), request.get_json(silent=True))
    return jsonify(body), status


@eco.route("/api/session", methods=['GET'])
def session_state():
    return jsonify(get_controller().snapshot())


@eco.route("/api/session/login", methods=['POST'])
def login():
    data = json_body()
    controller = get_controller()
    email = data.get('email')
    if not email or not isinstance(email, str):
        return failure(translate(controller.language, 'missing_fields'), 400)
    controller.login(email, data.get('password', ''))
    return jsonify(controller.snapshot())


@eco.route("/api/session/register", methods=['POST'])
def signup():
    data = json_body()
    controller = get_controller(LocalRegistrationGateway(get_users_collection()))
    try:
        controller.register(data.get('name'), data.get('email'), data.get('password'),
                            data.get('confirm_password'))
    except RegistrationError as e:
        return failure(e.message, e.status)
    snapshot = controller.snapshot()
    snapshot['message'] = translate(controller.language, 'registration_success')
    return jsonify(snapshot)


@eco.route("/api/session/logout", methods=['POST'])
def logout():
    controller = get_controller()
    controller.logout()
    return jsonify(controller.snapshot())


@eco.route("/api/session/points", methods=['POST'])
def award_points():
    data = json_body()
    controller = get_controller()
    try:
        controller.award_points(data.get('points', 0), data.get('tasksCompleted', 0))
    except ValueError as e:
        return failure(str(e), 400)
    return jsonify(controller.snapshot())


@eco.route("/api/session/navigate", methods=['POST'])
def navigate():
    data = json_body()
    controller = get_controller()
    try:
        controller.navigate(data.get('page'))
    except ValueError as e:
        return failure(str(e), 400)
    return jsonify(controller.snapshot())


@eco.route("/api/preferences/theme", methods=['POST'])
def toggle_theme():
    controller = get_controller()
    controller.toggle_theme()
    return jsonify(controller.snapshot())


@eco.route("/api/preferences/language", methods=['POST'])
def set_language():
    data = json_body()
    controller = get_controller()
    try:
        controller.set_language(data.get('language'))
    except ValueError as e:
        return failure(str(e), 400)
    return jsonify(controller.snapshot())


@eco.route("/api/translations/<lang>", methods=['GET'])
def translations(lang):
    if lang not in LANGUAGES:
        return failure('Not found', 404)
    return jsonify(TRANSLATIONS[lang])


@eco.route('/chatbot', methods=['POST'])
def chatbot():
    data = json_body()
    user_message = data.get('message', '')
    if not isinstance(user_message, str):
        user_message = ''
    return jsonify({'reply': reply(user_message, get_controller().language)})


# mock plant recognition
@eco.route('/api/plant/identify', methods=['POST'])
def plant_identify():
    language = get_controller().language
    if 'file' not in request.files:
        return failure(translate(language, 'invalid_image'), 400)
    image_data = request.files['file']
    # the raw name keeps non-ASCII stems like "фото.png" intact; Pillow checks the bytes
    ext = os.path.splitext(image_data.filename or '')[1].lower()
    if ext not in ALLOWED_EXTENSIONS:
        return failure(translate(language, 'invalid_image'), 400)
    try:
        profile = identify(image_data.read(), language)
    except InvalidImageError as e:
        logger.info("Rejected plant upload %r: %s", image_data.filename, e)
        return failure(translate(language, 'invalid_image'), 400)
    return jsonify({'success': True, 'plant': profile})


@eco.app_errorhandler(404)
def page_not_found(e):
    return failure('Not found', 404)


def create_app(overrides=None):
    app = Flask(__name__)
    app.config.from_mapping(config.as_dict())
    if overrides:
        app.config.update(overrides)
    app.secret_key = app.config['SECRET_KEY']
    app.permanent_session_lifetime = timedelta(days=app.config['SESSION_LIFETIME_DAYS'])
    app.json.ensure_ascii = False

    logging.basicConfig(
        level=app.config['LOG_LEVEL'],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.register_blueprint(eco)
    return app


application = create_app()

if __name__ == "__main__":
    application.run()
