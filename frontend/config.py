import os

APP_TITLE = os.getenv("APP_TITLE", "✨ Flashcards")

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000/api")

# Unset means requests wait indefinitely
_timeout = os.getenv("REQUEST_TIMEOUT")
REQUEST_TIMEOUT = float(_timeout) if _timeout else None

UNCATEGORIZED = "Uncategorized"
ALL_CATEGORIES = "all"
