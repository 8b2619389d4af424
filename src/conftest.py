"""Test environment shared by every test module under src/.

api.security reads these at import time, so they must be set before the
application is imported.
"""

import os

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("API_USERNAME", "tester")
os.environ.setdefault("API_PASSWORD", "s3cret-pass")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
