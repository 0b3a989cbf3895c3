"""
Name: Raw Request Body Parsing Tests

Responsibilities:
  - Valid payloads become the request DTO with nothing rejected
  - Type errors, malformed JSON and non-object payloads are reported by
    wire field name instead of raising
"""

from datetime import date

import pytest

from leavedesk.interfaces.api.http.body import RawBody, json_body_openapi, parse_body
from leavedesk.interfaces.api.http.schemas import LeaveReq, UpdateProfileReq

pytestmark = pytest.mark.unit


def test_valid_payload_is_parsed():
    body = RawBody(value={"firstName": "Ann", "dateOfBirth": "1992-02-02"})

    req, rejected = parse_body(UpdateProfileReq, body)

    assert rejected == ()
    assert req.first_name == "Ann"
    assert req.date_of_birth == date(1992, 2, 2)


def test_empty_body_is_an_empty_dto():
    req, rejected = parse_body(LeaveReq, RawBody())

    assert rejected == ()
    assert req == LeaveReq()


def test_type_errors_are_reported_by_wire_name():
    req, rejected = parse_body(
        LeaveReq, RawBody(value={"from": "yesterday", "userId": "abc"})
    )

    assert rejected == ("from", "userId")
    assert req == LeaveReq()


@pytest.mark.parametrize(
    "body",
    [RawBody(malformed=True), RawBody(value=[{"firstName": "Ann"}]), RawBody(value=7)],
)
def test_non_object_bodies_are_rejected_as_body(body):
    _, rejected = parse_body(UpdateProfileReq, body)

    assert rejected == ("body",)


def test_openapi_documents_the_schema_by_alias():
    extra = json_body_openapi(LeaveReq)

    schema = extra["requestBody"]["content"]["application/json"]["schema"]
    assert {"from", "to", "emergencyContact", "userId"} <= set(schema["properties"])
    assert extra["requestBody"]["required"] is False
