# config.py
# Settings are read from the environment (or a local .env file)

import os
from dotenv import load_dotenv

load_dotenv()

SECRET_KEY = os.environ.get("SECRET_KEY") or os.urandom(24)

# MongoDB setup
MONGO_URI = os.environ.get("MONGO_URI", "mongodb://localhost:27017/")
MONGO_DB = os.environ.get("MONGO_DB", "eco_platform")

# Registration API used by the standalone session controller
REGISTRATION_API_URL = os.environ.get("REGISTRATION_API_URL", "http://localhost:5000/api/register")
REQUEST_TIMEOUT = float(os.environ.get("REQUEST_TIMEOUT", "10"))

MIN_PASSWORD_LENGTH = int(os.environ.get("MIN_PASSWORD_LENGTH", "6"))

# simulated latency (seconds) of the chat widget
CHAT_THINKING_DELAY = float(os.environ.get("CHAT_THINKING_DELAY", "0.8"))
PLANT_ANALYSIS_DELAY = float(os.environ.get("PLANT_ANALYSIS_DELAY", "2.0"))

SESSION_LIFETIME_DAYS = int(os.environ.get("SESSION_LIFETIME_DAYS", "365"))

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


def as_dict():
    return {
        'SECRET_KEY': SECRET_KEY,
        'MONGO_URI': MONGO_URI,
        'MONGO_DB': MONGO_DB,
        'REGISTRATION_API_URL': REGISTRATION_API_URL,
        'REQUEST_TIMEOUT': REQUEST_TIMEOUT,
        'MIN_PASSWORD_LENGTH': MIN_PASSWORD_LENGTH,
        'CHAT_THINKING_DELAY': CHAT_THINKING_DELAY,
        'PLANT_ANALYSIS_DELAY': PLANT_ANALYSIS_DELAY,
        'SESSION_LIFETIME_DAYS': SESSION_LIFETIME_DAYS,
        'LOG_LEVEL': LOG_LEVEL,
    }
