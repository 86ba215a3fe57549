import logging

import pytest
from rest_framework.test import APIClient


@pytest.fixture(autouse=True)
def silence_django_request_logger():
    """Reduce noise from expected 4xx in passing tests.

    Many tests deliberately hit 400/404 paths to check validation and
    the JSON error bodies. Django logs these at WARNING via
    'django.request'; lower that logger to ERROR during tests.
    """
    logger = logging.getLogger("django.request")
    old = logger.level
    logger.setLevel(logging.ERROR)
    try:
        yield
    finally:
        logger.setLevel(old)


@pytest.fixture
def api_client():
    return APIClient()
