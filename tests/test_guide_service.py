from climbsafe.models.entities.guide import Guide
from climbsafe.models.guide_registry import GuideRegistry
from climbsafe.services.guide_service import GuideRegistrationService
from climbsafe.utils.validation import EMPTY_INPUT_MESSAGE, LETTERS_ONLY_MESSAGE

from conftest import FakeGuideStore


def test_register_concatenates_first_and_last_name(service, registry):
    result = service.register_guide("alice", "secret", "Alice", "Smith", "bob")

    assert result["status"] == "success"
    assert result["guide"] == {"email": "alice", "name": "AliceSmith", "emergencyContact": "bob"}
    assert registry.get("alice").password == "secret"


def test_register_duplicate_reports_message(service, registry):
    service.register_guide("alice", "secret", "Alice", "Smith", "bob")

    result = service.register_guide("alice", "other", "Alice", "Jones", "carl")

    assert result["status"] == "error"
    assert result["error"] == "DuplicateEmail"
    assert "alice" in result["message"]
    assert registry.get("alice").name == "AliceSmith"


def test_empty_field_is_rejected_without_touching_registry(service, registry):
    result = service.register_guide("alice", "", "Alice", "Smith", "bob")

    assert result == {"status": "error", "error": "InvalidInput", "message": EMPTY_INPUT_MESSAGE}
    assert len(registry) == 0


def test_empty_first_and_last_name_is_empty_input(service):
    result = service.register_guide("alice", "secret", "", "", "bob")

    assert result["message"] == EMPTY_INPUT_MESSAGE


def test_missing_fields_count_as_empty(service):
    assert service.update_guide("alice", None, "Alice", None, "bob")["message"] == EMPTY_INPUT_MESSAGE


def test_register_rejects_realistic_email_address(service, registry):
    # The letters-only gate applies to every field, so real email addresses
    # and numeric contacts are refused. Kept literal; revisit if the rule changes.
    result = service.register_guide("alice@example.com", "secret", "Alice", "Smith", "bob")

    assert result["error"] == "InvalidInput"
    assert result["message"] == LETTERS_ONLY_MESSAGE
    assert len(registry) == 0


def test_register_rejects_numeric_emergency_contact(service):
    result = service.register_guide("alice", "secret", "Alice", "Smith", "5551234")

    assert result["message"] == LETTERS_ONLY_MESSAGE


def test_update_overwrites_fields(service, registry):
    service.register_guide("alice", "secret", "Alice", "Smith", "bob")

    result = service.update_guide("alice", "newpw", "Alice", "Jones", "carl")

    assert result["status"] == "success"
    assert registry.get("alice") == Guide("alice", "newpw", "AliceJones", "carl")


def test_update_unknown_guide(service):
    result = service.update_guide("ghost", "pw", "Casper", "Ghost", "none")

    assert result["error"] == "NotFound"


def test_delete_validates_then_removes(service, registry):
    service.register_guide("alice", "secret", "Alice", "Smith", "bob")

    assert service.delete_guide("alice@x")["message"] == LETTERS_ONLY_MESSAGE
    assert service.delete_guide("")["message"] == EMPTY_INPUT_MESSAGE
    assert service.delete_guide("alice")["status"] == "success"
    assert service.delete_guide("alice")["error"] == "NotFound"


def test_get_and_list_never_expose_password(service):
    service.register_guide("alice", "secret", "Alice", "Smith", "bob")

    assert "password" not in service.get_guide("alice")["guide"]
    assert service.list_guides() == [{"email": "alice", "name": "AliceSmith", "emergencyContact": "bob"}]
    assert service.get_guide("ghost")["error"] == "NotFound"


def test_storage_failure_becomes_error_result():
    store = FakeGuideStore()
    store.fail_with = RuntimeError("database unavailable")
    registry = GuideRegistry(store=store)
    service = GuideRegistrationService(registry)

    result = service.register_guide("alice", "secret", "Alice", "Smith", "bob")

    assert result["status"] == "error"
    assert result["error"] == "StorageError"
    assert "database unavailable" in result["message"]
    assert len(registry) == 0


def test_non_string_fields_are_invalid_input(service, registry):
    assert service.register_guide("alice", 1234, "Alice", "Smith", "bob")["message"] == LETTERS_ONLY_MESSAGE
    assert service.register_guide("alice", "secret", 42, "Smith", "bob")["message"] == LETTERS_ONLY_MESSAGE
    assert service.update_guide("alice", "secret", "Alice", ["Smith"], "bob")["error"] == "InvalidInput"
    assert len(registry) == 0
