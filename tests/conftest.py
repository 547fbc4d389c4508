"""Shared fixtures for the ClimbSafe tests."""
import pytest

from climbsafe.application import create_app
from climbsafe.config import TestingConfig
from climbsafe.models.guide_registry import GuideRegistry
from climbsafe.services.guide_service import GuideRegistrationService


class FakeGuideStore:
    """Stands in for GuideDAO; records writes and can be told to fail."""

    def __init__(self, guides=None):
        self.guides = {guide.email: guide for guide in guides or []}
        self.calls = []
        self.fail_with = None

    def _maybe_fail(self):
        if self.fail_with is not None:
            raise self.fail_with

    def get_all_guides(self):
        return sorted(self.guides.values(), key=lambda g: g.email)

    def insert_guide(self, guide):
        self.calls.append(("insert", guide.email))
        self._maybe_fail()
        self.guides[guide.email] = guide

    def update_guide(self, guide):
        self.calls.append(("update", guide.email))
        self._maybe_fail()
        self.guides[guide.email] = guide

    def delete_guide(self, email):
        self.calls.append(("delete", email))
        self._maybe_fail()
        del self.guides[email]


@pytest.fixture
def store():
    return FakeGuideStore()


@pytest.fixture
def registry():
    return GuideRegistry()


@pytest.fixture
def service(registry):
    return GuideRegistrationService(registry)


@pytest.fixture
def app(registry):
    return create_app(TestingConfig, registry=registry)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def cli_runner(app):
    return app.test_cli_runner()
