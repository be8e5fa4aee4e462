# registry.py
# Server side of registration: validates the form and inserts a users record

import logging

from pymongo.errors import PyMongoError

from models import new_account

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('name', 'email', 'password')


def register_user(users_collection, payload):
    """Insert one user; returns ``(body, status)`` for the HTTP layer.

    Bodies are always ``{"success": bool, "message": str}``. A payload that is
    not an object, or a field that is not a non-empty string, counts as missing.
    """
    if not isinstance(payload, dict):
        payload = {}
    name, email, password = (payload.get(field) for field in REQUIRED_FIELDS)
    if not all(isinstance(value, str) and value for value in (name, email, password)):
        return {'success': False, 'message': 'Missing fields'}, 400

    try:
        if users_collection.find_one({"email": email}):
            return {'success': False, 'message': 'Email already registered'}, 409
        result = users_collection.insert_one(new_account(name, email, password))
    except PyMongoError as e:
        logger.error("DB error while registering %s: %s", email, e)
        return {'success': False, 'message': 'DB error'}, 500

    logger.info("Registered user %s (%s)", email, result.inserted_id)
    return {'success': True, 'message': 'User registered!'}, 200
