"""
File: guide_registry.py
Purpose: In-memory registry of Guide records keyed by email.
"""
import logging
import threading
from enum import Enum

from climbsafe.models.entities.guide import Guide

logger = logging.getLogger(__name__)


class ErrorKind(Enum):
    INVALID_INPUT = "InvalidInput"
    DUPLICATE_EMAIL = "DuplicateEmail"
    NOT_FOUND = "NotFound"
    STORAGE_ERROR = "StorageError"


def success(guide=None):
    return {"status": "success", "guide": guide}


def failure(kind, message):
    return {"status": "error", "error": kind, "message": message}


class GuideRegistry:
    """
    Exclusive owner of the Guide collection.

    Enforces one guide per email. Registry failures (empty field, duplicate
    email, unknown email) come back as result dicts built by ``success`` and
    ``failure``; nothing is raised for them and nothing is mutated.

    When a ``store`` (e.g. GuideDAO) is attached, every mutation is written
    to it first. An exception from the store propagates and the in-memory
    collection stays as it was.
    """

    def __init__(self, store=None):
        self.store = store
        self._guides = {}
        self._lock = threading.RLock()

    def load(self):
        """Replaces the in-memory contents with what the store holds."""
        if self.store is None:
            return 0
        guides = self.store.get_all_guides()
        with self._lock:
            self._guides = {guide.email: guide for guide in guides}
        logger.info("Loaded %d guides from store", len(guides))
        return len(guides)

    def register(self, email, password, name, emergency_contact):
        empty = _first_empty(email=email, password=password, name=name,
                             emergency_contact=emergency_contact)
        if empty:
            return failure(ErrorKind.INVALID_INPUT, f"The {empty} must not be empty.")

        with self._lock:
            if email in self._guides:
                logger.info("Registration rejected: %s already exists", email)
                return failure(ErrorKind.DUPLICATE_EMAIL,
                               f"A guide with email {email} already exists.")

            guide = Guide(email, password, name, emergency_contact)
            if self.store is not None:
                self.store.insert_guide(guide)
            self._guides[email] = guide

        logger.info("Registered guide %s", email)
        return success(guide.copy())

    def update(self, email, password, name, emergency_contact):
        empty = _first_empty(email=email, password=password, name=name,
                             emergency_contact=emergency_contact)
        if empty:
            return failure(ErrorKind.INVALID_INPUT, f"The {empty} must not be empty.")

        with self._lock:
            if email not in self._guides:
                return _not_found(email)

            updated = Guide(email, password, name, emergency_contact)
            if self.store is not None:
                self.store.update_guide(updated)
            self._guides[email] = updated

        logger.info("Updated guide %s", email)
        return success(updated.copy())

    def delete(self, email):
        if not email:
            return failure(ErrorKind.INVALID_INPUT, "The email must not be empty.")

        with self._lock:
            if email not in self._guides:
                return _not_found(email)

            if self.store is not None:
                self.store.delete_guide(email)
            removed = self._guides.pop(email)

        logger.info("Deleted guide %s", email)
        return success(removed.copy())

    def get(self, email):
        """Returns a snapshot of the guide registered under ``email``, or None."""
        with self._lock:
            guide = self._guides.get(email)
            return guide.copy() if guide else None

    def exists(self, email):
        with self._lock:
            return email in self._guides

    def list(self):
        with self._lock:
            return [self._guides[email].copy() for email in sorted(self._guides)]

    def __len__(self):
        with self._lock:
            return len(self._guides)


def _first_empty(**fields):
    """Returns the readable name of the first empty field, if any."""
    for field, value in fields.items():
        if not value:
            return field.replace('_', ' ')
    return None


def _not_found(email):
    logger.info("No guide registered under %s", email)
    return failure(ErrorKind.NOT_FOUND, f"Guide {email} does not exist.")
