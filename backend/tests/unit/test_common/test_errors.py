from keyword_board.common.errors import (
    AppError,
    InfrastructureError,
    MethodNotAllowedError,
    NotFoundError,
    ValidationError,
)


def test_status_codes():
    assert ValidationError().status_code == 400
    assert NotFoundError().status_code == 404
    assert MethodNotAllowedError().status_code == 405
    assert InfrastructureError().status_code == 500


def test_to_dict_puts_message_at_top_level():
    err = NotFoundError(message="Keyword not found", code="keyword_not_found")

    assert err.to_dict() == {
        "message": "Keyword not found",
        "type": "not_found_error",
        "code": "keyword_not_found",
    }


def test_to_dict_details_can_be_hidden():
    err = AppError("boom", details={"field": "username"})

    assert err.to_dict()["details"] == {"field": "username"}
    assert "details" not in err.to_dict(include_details=False)


def test_infrastructure_error_default_message():
    assert InfrastructureError().message == "Server Error"
