# models.py
# Shapes of the two user records the platform deals with

from datetime import datetime

from werkzeug.security import generate_password_hash

# Stored in the MongoDB "users" collection by the registration endpoint
account_schema = {
    'name': 'str',  # User's full name
    'email': 'str',  # User's email address
    'password_hash': 'str',  # werkzeug hash, never the plain password
    'join_date': 'str',  # Date of registration (YYYY-MM-DD)
}

# Mirrored in the browser session as the active user
session_user_schema = {
    'name': 'str',  # Display name
    'email': 'str',  # Lookup key for the simulated login
    'points': 0,  # Integer, never decreases
    'tasksCompleted': 0,  # Integer, grows together with points
}


def new_account(name, email, password):
    return {
        'name': name,
        'email': email,
        'password_hash': generate_password_hash(password),
        'join_date': datetime.now().strftime('%Y-%m-%d'),
    }


def new_user(name, email):
    return {
        'name': name,
        'email': email,
        'points': 0,
        'tasksCompleted': 0,
    }


def is_session_user(value):
    return (
        isinstance(value, dict)
        and all(isinstance(value.get(key), type(kind)) for key, kind in session_user_schema.items())
    )
