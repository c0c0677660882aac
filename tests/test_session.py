import uuid

from storefront.services.session import resolve_session_id


def test_provided_id_is_reused_verbatim():
    assert resolve_session_id("my cart!") == "my cart!"


def test_missing_id_generates_uuid():
    session_id = resolve_session_id(None)

    assert str(uuid.UUID(session_id)) == session_id


def test_empty_id_generates_fresh_ids():
    first = resolve_session_id("")
    second = resolve_session_id("")

    assert first and second
    assert first != second
