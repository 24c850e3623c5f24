"""Envelope decoding."""

import json

import pytest
from hypothesis import given
from hypothesis import strategies as st

from backdrop_admin import InvalidResponseError, ServerError
from backdrop_admin.models import Block, Page, StatusReport
from backdrop_admin.transport.envelope import (
    decode_action,
    decode_envelope,
    decode_error_body,
    parse_envelope,
)

from conftest import envelope

json_values = st.recursive(
    st.none() | st.booleans() | st.integers() | st.text(max_size=20),
    lambda children: st.lists(children, max_size=4) | st.dictionaries(st.text(max_size=8), children, max_size=4),
    max_leaves=10,
)

REPORT = {"requirements": [
    {"title": "Backdrop", "value": "1.28.1", "severity": -1},
    {"title": "Cron maintenance tasks", "value": "Last run 3 hours ago", "severity": 0},
    {"title": "File system", "value": "Not writable", "severity": 2, "description": "Check permissions"},
]}


def raw(payload) -> bytes:
    return json.dumps(payload).encode()


class TestDecodeEnvelope:
    def test_typed_data(self):
        report = decode_envelope(raw(envelope(REPORT)), StatusReport)
        assert isinstance(report, StatusReport)
        assert [r.title for r in report.errors] == ["File system"]

    def test_generic_models(self):
        blocks = decode_envelope(raw(envelope([
            {"uuid": "u1", "module": "system", "delta": "main", "layout": "default", "region": "content"},
        ])), list[Block])
        assert blocks[0].weight == 0

    def test_without_model_returns_json(self):
        assert decode_envelope(raw(envelope({"a": 1}))) == {"a": 1}

    def test_failure_raises_server_error_with_message(self):
        with pytest.raises(ServerError) as exc:
            decode_envelope(raw(envelope({"ignored": True}, success=False, message="Access denied")), StatusReport)
        assert str(exc.value) == "Access denied"

    def test_failure_without_message(self):
        with pytest.raises(ServerError, match="Unknown error"):
            decode_envelope(raw(envelope(success=False)))

    def test_null_data_is_none(self):
        assert decode_envelope(raw(envelope()), StatusReport) is None

    def test_null_data_when_required(self):
        with pytest.raises(InvalidResponseError):
            decode_envelope(raw(envelope()), StatusReport, require_data=True)

    @pytest.mark.parametrize("body", [
        b"<html>not json</html>",
        b"",
        b'{"message": "no success flag"}',
        b'{"success": true, "data": null, "extra": 1}',
        b"[1, 2, 3]",
        b'{"success": "yes", "data": null}',
        b'{"success": 1, "data": null}',
        b'{"success": "true", "data": null}',
    ])
    def test_malformed_envelopes(self, body):
        with pytest.raises(InvalidResponseError):
            decode_envelope(body)

    def test_missing_required_field_fails_closed(self):
        payload = envelope({"requirements": [{"title": "PHP"}]})
        with pytest.raises(InvalidResponseError):
            decode_envelope(raw(payload), StatusReport)

    def test_unknown_field_fails_closed(self):
        payload = envelope({"requirements": [{"title": "PHP", "value": "8.2", "surprise": 1}]})
        with pytest.raises(InvalidResponseError):
            decode_envelope(raw(payload), StatusReport)

    def test_page_mismatch_is_invalid_response(self):
        payload = envelope({"items": [], "total": 45, "page": 1, "limit": 20, "pages": 2})
        with pytest.raises(InvalidResponseError):
            decode_envelope(raw(payload), Page[Block])


class TestDecodeAction:
    def test_success_without_payload(self):
        result = decode_action(raw(envelope(message="Caches cleared.")))
        assert result.success
        assert result.message == "Caches cleared."

    def test_failure(self):
        with pytest.raises(ServerError, match="Cron is already running"):
            decode_action(raw(envelope(success=False, message="Cron is already running")))


class TestDecodeErrorBody:
    def test_structured(self):
        body = decode_error_body(b'{"error": true, "message": "Forbidden", "code": 403}')
        assert body.message == "Forbidden"
        assert body.code == 403

    def test_code_is_optional(self):
        assert decode_error_body(b'{"error": true, "message": "Oops"}').code is None

    @pytest.mark.parametrize("body", [b"", b"<html/>", b'{"success": false, "message": "x"}'])
    def test_not_an_error_body(self, body):
        assert decode_error_body(body) is None


@given(data=json_values, success=st.booleans(), message=st.none() | st.text(max_size=20))
def test_decoding_is_idempotent(data, success, message):
    body = raw({"success": success, "message": message, "data": data})

    def outcome():
        try:
            return ("ok", decode_envelope(body))
        except ServerError as e:
            return ("error", str(e))

    assert outcome() == outcome()


@given(data=json_values, message=st.none() | st.text(max_size=20))
def test_failed_envelope_never_carries_data(data, message):
    envelope_ = parse_envelope(raw({"success": False, "message": message, "data": data}))
    assert envelope_.data is None
