import pytest

from app.core.errors import BadRequestError
from app.core.security import decode_signed_request
from app.domains.workplace.services import (
    SIGNED_REQUEST_SESSION_KEY, load_signed_request, parse_signed_request
)

from helpers import make_signed_request

SECRET = "test-app-secret"


def test_decode_valid_signed_request():
    raw = make_signed_request({"community_id": "10", "user_id": "ext1"}, secret=SECRET)
    payload = decode_signed_request(raw, SECRET)
    assert payload["community_id"] == "10"
    assert payload["user_id"] == "ext1"


@pytest.mark.parametrize("raw", ["", "no-dot", "a.b.c", "!!!.???"])
def test_decode_malformed_signed_request(raw):
    assert decode_signed_request(raw, SECRET) is None


def test_decode_rejects_wrong_secret():
    raw = make_signed_request({"community_id": "10", "user_id": "ext1"}, secret="other")
    assert decode_signed_request(raw, SECRET) is None


def test_parse_coerces_numeric_ids():
    raw = make_signed_request({"community_id": 10, "user_id": 42, "redirect": "/home"}, secret=SECRET)
    signed_request = parse_signed_request(raw, SECRET)
    assert signed_request.community_id == "10"
    assert signed_request.user_id == "42"
    assert signed_request.redirect == "/home"


def test_parse_requires_user_id():
    raw = make_signed_request({"community_id": "10"}, secret=SECRET)
    with pytest.raises(BadRequestError):
        parse_signed_request(raw, SECRET)


def test_malformed_session_entry_is_discarded():
    session = {SIGNED_REQUEST_SESSION_KEY: {"redirect": "/home"}}
    assert load_signed_request(session) is None
    assert SIGNED_REQUEST_SESSION_KEY not in session
