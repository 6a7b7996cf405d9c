import httpx
import pytest

from apicommons.clients.http import failure_from_response, result_from_response
from apicommons.domain.result import Err, Ok
from apicommons.errors import FailureCategory


@pytest.mark.parametrize(
    "status_code, category",
    [
        (400, FailureCategory.BAD_REQUEST),
        (401, FailureCategory.UNAUTHORIZED),
        (404, FailureCategory.NOT_FOUND),
    ],
)
def test_annotated_statuses(status_code, category):
    err = failure_from_response(httpx.Response(status_code, text='{"error":"nope"}'))
    assert err.category is category
    assert err.message == f'{{"error":"nope"}} -> {status_code}'


def test_other_statuses_carry_raw_body():
    err = failure_from_response(httpx.Response(403, text="denied"))
    assert err == Err(FailureCategory.FORBIDDEN, "denied")

    err = failure_from_response(httpx.Response(503, text="maintenance"))
    assert err.category is FailureCategory.INTERNAL_SERVER_ERROR
    assert err.status_code == 500


def test_empty_body_has_no_message():
    assert failure_from_response(httpx.Response(502)).message is None


def test_result_from_success():
    result = result_from_response(httpx.Response(201, json=[1, 2]))
    assert result.is_ok
    assert result.value == [1, 2]
    assert result_from_response(httpx.Response(200, json={"a": 1})) == Ok({"a": 1})
    assert result_from_response(httpx.Response(204)) == Ok(None)


def test_result_from_invalid_json():
    result = result_from_response(httpx.Response(200, text="not json"))
    assert isinstance(result, Err)
    assert not result.is_ok
    assert result.category is FailureCategory.INTERNAL_SERVER_ERROR


def test_result_from_failure():
    result = result_from_response(httpx.Response(422, text="bad id"))
    assert result == Err(FailureCategory.UNKNOWN_OBJECT, "bad id")
