#config/settings

import os
from dotenv import load_dotenv

# Load variables from the .env file
load_dotenv()

APP_TITLE = os.getenv("APP_TITLE", "What Today Words API")

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./whattoday_words.db")

# Comma-separated list; "*" allows any origin
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
