"""
File: guide_service.py
Purpose: Service Layer for guide registration (validation, registry calls, messages).
"""
import logging

from climbsafe.models.guide_registry import ErrorKind
from climbsafe.utils.validation import validate_fields

logger = logging.getLogger(__name__)


class GuideRegistrationService:
    """
    Gates raw presentation input through ``validate_fields`` and turns every
    registry outcome into ``{"status", "message"}``; failures also carry the
    ``error`` kind.
    """

    def __init__(self, registry):
        self.registry = registry

    def register_guide(self, email, password, first_name, last_name, emergency_contact):
        name = _full_name(first_name, last_name)
        return self._run(
            "register", (email, password, name, emergency_contact),
            lambda: self.registry.register(email, password, name, emergency_contact),
            f"Guide {email} registered successfully"
        )

    def update_guide(self, email, password, first_name, last_name, emergency_contact):
        name = _full_name(first_name, last_name)
        return self._run(
            "update", (email, password, name, emergency_contact),
            lambda: self.registry.update(email, password, name, emergency_contact),
            f"Guide {email} updated successfully"
        )

    def delete_guide(self, email):
        return self._run(
            "delete", (email,),
            lambda: self.registry.delete(email),
            f"Guide {email} deleted successfully"
        )

    def get_guide(self, email):
        guide = self.registry.get(email)
        if guide is None:
            return _error(ErrorKind.NOT_FOUND, f"Guide {email} does not exist.")
        return {"status": "success", "message": "", "guide": guide.to_dict()}

    def list_guides(self):
        return [guide.to_dict() for guide in self.registry.list()]

    def _run(self, action, fields, operation, success_message):
        """Validation gate, then exactly one registry call."""
        invalid = validate_fields(*fields)
        if invalid:
            logger.warning("Rejected %s: %s", action, invalid)
            return _error(ErrorKind.INVALID_INPUT, invalid)

        try:
            result = operation()
        except Exception as e:
            logger.exception("Error during guide %s", action)
            return _error(ErrorKind.STORAGE_ERROR, f"Could not {action} guide: {e}")

        if result["status"] != "success":
            return _error(result["error"], result["message"])

        response = {"status": "success", "message": success_message}
        if result["guide"] is not None:
            response["guide"] = result["guide"].to_dict()
        return response


def _full_name(first_name, last_name):
    """Concatenates first and last name; a non-string part is handed on for validation to refuse."""
    parts = [first_name or '', last_name or '']
    for part in parts:
        if not isinstance(part, str):
            return part
    return ''.join(parts)


def _error(kind, message):
    return {"status": "error", "error": kind.value, "message": message}
