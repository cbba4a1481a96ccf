"""
Root pytest configuration for the Django project.

This module configures pytest-django and provides project-wide fixtures.
App-specific fixtures are defined in each app's tests/conftest.py.
"""

import os
import django
import pytest

# Ensure Django settings are configured before any tests run
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("SECURE_SSL_REDIRECT", "False")
os.environ.setdefault("SESSION_COOKIE_SECURE", "False")
os.environ.setdefault("CSRF_COOKIE_SECURE", "False")


def pytest_configure():
    """Configure Django settings before tests run."""
    django.setup()


@pytest.fixture(autouse=True)
def paylike_settings(settings):
    """Known storefront and Paylike settings for every test."""
    settings.SITE_URL = "http://testserver"
    settings.SHOP_URL = "http://testserver/shop"
    settings.SHOP_ERROR_REDIRECT_PATH = "/index.php"
    settings.SHOP_CURRENCY = "USD"
    settings.PAYLIKE_ENABLED = True
    settings.PAYLIKE_TEST_MODE = True
    settings.PAYLIKE_TEST_PUBLIC_KEY = "test-public-key"
    settings.PAYLIKE_TEST_PRIVATE_KEY = "test-private-key"
    settings.PAYLIKE_PUBLIC_KEY = "live-public-key"
    settings.PAYLIKE_PRIVATE_KEY = "live-private-key"
    settings.ALLOWED_HOSTS = ["testserver", "localhost"]
    return settings
