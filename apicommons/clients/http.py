"""Map failed responses from outbound HTTP calls onto tagged failures."""

import httpx

from apicommons.domain.result import Err, Ok, Result
from apicommons.errors import FailureCategory, category_for_status

# Statuses whose failure message is suffixed with the status code.
ANNOTATED_STATUSES = {
    400: FailureCategory.BAD_REQUEST,
    401: FailureCategory.UNAUTHORIZED,
    404: FailureCategory.NOT_FOUND,
}


def failure_from_response(response: httpx.Response) -> Err:
    body = response.text
    category = ANNOTATED_STATUSES.get(response.status_code)
    if category is not None:
        return Err(category, f"{body} -> {response.status_code}")
    return Err(category_for_status(response.status_code), body or None)


def result_from_response(response: httpx.Response) -> Result:
    """Ok with the decoded JSON body (or None when empty) for 2xx, else a failure."""
    if not response.is_success:
        return failure_from_response(response)
    if not response.content:
        return Ok(None)
    try:
        return Ok(response.json())
    except ValueError:
        return Err(FailureCategory.INTERNAL_SERVER_ERROR, f"invalid JSON body: {response.text}")
