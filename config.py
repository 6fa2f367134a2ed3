import os
from datetime import timedelta
from dotenv import load_dotenv

# Load environment variables from .env file
BASE_DIR = os.path.abspath(os.path.dirname(__file__))
dotenv_path = os.path.join(BASE_DIR, '.env')

# Load the .env file from that specific path
load_dotenv(dotenv_path=dotenv_path)


class Config:
    """Base configuration class."""

    SECRET_KEY = os.getenv('SECRET_KEY') or 'dev-fallback-secret-key-change-in-prod'

    # Session settings (the identity provider writes the session)
    PERMANENT_SESSION_LIFETIME = timedelta(days=30)
    SESSION_PROTECTION = 'basic'

    # Google Sheets backing store
    GOOGLE_SERVICE_ACCOUNT_KEY = os.getenv('GOOGLE_SERVICE_ACCOUNT_KEY')
    GOOGLE_SERVICE_ACCOUNT_FILE = os.getenv('GOOGLE_SERVICE_ACCOUNT_FILE')
    GOOGLE_SPREADSHEET_ID = os.getenv('GOOGLE_SPREADSHEET_ID', '')

    SHEET_MEMBERS = os.getenv('SHEET_MEMBERS', 'Members')
    SHEET_REQUESTS = os.getenv('SHEET_REQUESTS', 'Requests')
    SHEET_ACHIEVEMENT_TYPES = os.getenv('SHEET_ACHIEVEMENT_TYPES', 'AchievementTypes')
    SHEET_HEADER_ROWS = int(os.getenv('SHEET_HEADER_ROWS', 1))

    # Unparseable numeric cells: coerce to 0 (lenient) or skip the row (strict)
    STRICT_NUMERIC_CELLS = os.getenv('STRICT_NUMERIC_CELLS', 'false').lower() in ['true', 'on', '1']

    # Proof image storage
    STORAGE_UPLOAD_URL = os.getenv('STORAGE_UPLOAD_URL')
    STORAGE_PUBLIC_URL = os.getenv('STORAGE_PUBLIC_URL')
    STORAGE_API_KEY = os.getenv('STORAGE_API_KEY')
    STORAGE_PREFIX = os.getenv('STORAGE_PREFIX', 'volunteer-proofs')
    STORAGE_TIMEOUT = int(os.getenv('STORAGE_TIMEOUT', 30))

    MAX_CONTENT_LENGTH = 10 * 1024 * 1024
    ALLOWED_IMAGE_EXTENSIONS = {'jpg', 'jpeg', 'png', 'gif', 'webp', 'heic'}

    # Email configuration
    MAIL_SERVER = os.getenv('MAIL_SERVER', 'smtp.googlemail.com')
    MAIL_PORT = int(os.getenv('MAIL_PORT', 587))
    MAIL_USE_TLS = os.getenv('MAIL_USE_TLS', 'true').lower() in ['true', 'on', '1']
    MAIL_USERNAME = os.getenv('MAIL_USERNAME')
    MAIL_PASSWORD = os.getenv('MAIL_PASSWORD')
    MAIL_DEFAULT_SENDER = os.getenv('MAIL_DEFAULT_SENDER', 'noreply@example.com')

    # New-request notifications go to the club owners
    NOTIFY_RECIPIENTS = [
        addr.strip() for addr in os.getenv('NOTIFY_RECIPIENTS', '').split(',') if addr.strip()
    ]
    NOTIFY_ASYNC = True

    # Flask-Caching
    CACHE_TYPE = os.getenv('CACHE_TYPE', 'SimpleCache')
    CACHE_DEFAULT_TIMEOUT = 300
    MEMBERS_CACHE_TIMEOUT = int(os.getenv('MEMBERS_CACHE_TIMEOUT', 60))
