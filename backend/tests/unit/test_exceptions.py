from app.exceptions import (
    ErrorCode, TestCasesException, InvalidInputException, NotFoundException,
    ReferenceNotFoundException, ConflictException, DataIntegrityException,
    exception_to_response
)


def test_not_found_message_and_status():
    exc = NotFoundException("Release", 3)

    assert exc.status_code == 404
    assert exc.message == "Release not found"
    assert exc.details == {"entity": "Release", "id": 3}
    assert exc.error_code == ErrorCode.NOT_FOUND

def test_reference_not_found_for_relation_target():
    exc = ReferenceNotFoundException("Platform", 999)

    assert exc.status_code == 400
    assert exc.message == "Platform not found: 999"

def test_reference_not_found_for_parent():
    exc = ReferenceNotFoundException("Product", 7, parent=True)

    assert exc.status_code == 404
    assert exc.message == "Product not found"

def test_status_codes():
    assert InvalidInputException("x").status_code == 400
    assert ConflictException().status_code == 409
    assert DataIntegrityException().status_code == 500
    assert TestCasesException().status_code == 500

def test_to_dict_and_str():
    exc = InvalidInputException("Name is required", details={"field": "name"})

    assert exc.to_dict() == {
        "error_code": 4000,
        "error_name": "INVALID_INPUT",
        "message": "Name is required",
        "details": {"field": "name"},
    }
    assert str(exc) == "[INVALID_INPUT:4000] Name is required"

def test_exception_to_response():
    assert exception_to_response(NotFoundException("Case", 1)) == {"error": "Case not found"}
