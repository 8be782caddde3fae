import pytest

from tripadmin.core.exceptions import (
    ErrorCode,
    FormValidationError,
    RecordNotFoundError,
    SerpApiException,
)


def test_serp_api_exception_defaults():
    exc = SerpApiException("Search failed")

    assert str(exc) == "Search failed"
    assert exc.code == 0
    assert exc.get_context() == {}
    assert exc.previous is None


def test_serp_api_exception_keeps_context_and_cause():
    cause = TimeoutError("read timed out")

    with pytest.raises(SerpApiException) as exc_info:
        try:
            raise cause
        except TimeoutError as err:
            raise SerpApiException("Search failed", code=504, context={"query": "ramen kyoto"}) from err

    exc = exc_info.value
    assert exc.code == 504
    assert exc.get_context() == {"query": "ramen kyoto"}
    assert exc.previous is cause


def test_serp_api_exception_previous_argument():
    cause = ValueError("bad json")

    exc = SerpApiException("Unreadable response", code=502, previous=cause)

    assert exc.__cause__ is cause
    assert exc.previous is cause


def test_admin_errors_carry_status_and_code():
    missing = RecordNotFoundError("Place", 12)
    invalid = FormValidationError([{"field": "name", "message": "The name field is required."}])

    assert missing.status_code == 404
    assert missing.error_code is ErrorCode.RECORD_NOT_FOUND
    assert missing.details == {"resource": "Place", "record": 12}
    assert invalid.status_code == 422
    assert invalid.details["validation_errors"][0]["field"] == "name"
