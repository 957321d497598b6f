"""Root conftest — shared test configuration."""

import os

# Ensure tests never pick up a real deployment's database
os.environ.setdefault("DATABASE_HOST", "localhost")
os.environ.setdefault("DATABASE_NAME", "newsletter_test")
os.environ.setdefault("LOG_FORMAT", "text")
