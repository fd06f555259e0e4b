import os
from dotenv import load_dotenv

load_dotenv()

API_BASE_URL = os.getenv("SCHOOL_CONNECT_API_URL", "http://localhost:8000/api")
STORAGE_PATH = os.getenv(
    "SCHOOL_CONNECT_STORAGE_PATH",
    os.path.join(os.path.expanduser("~"), ".school_connect", "storage.json"),
)
SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "school_connect.sid")

# Key under which the session token is persisted
TOKEN_KEY = "userToken"
