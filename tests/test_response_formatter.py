"""Response formatter tests."""

import json

import pytest

from github_manager.domain.exceptions import MalformedPayloadError, NotFoundError
from github_manager.domain.records.users import User
from github_manager.domain.value_objects import DEFAULT_ERROR_MESSAGE, ApiResponse
from github_manager.services.response_formatter import (
    ReturnFormat,
    decode_list,
    decode_record,
    decode_strings,
    format_response,
    parse_json,
)

USER = '{"login":"octocat","id":583231,"site_admin":false}'


class TestParseJson:
    def test_object(self):
        assert parse_json('{"a": 1}') == {"a": 1}

    def test_array_is_detected_structurally(self):
        assert parse_json("[1, 2]") == [1, 2]

    def test_invalid_json(self):
        with pytest.raises(MalformedPayloadError):
            parse_json("<html>")

    def test_scalar_is_rejected(self):
        with pytest.raises(MalformedPayloadError):
            parse_json('"just a string"')


class TestFormatResponse:
    def test_string_is_untouched(self):
        response = ApiResponse(status_code=200, text=USER)

        assert format_response(response, ReturnFormat.STRING, decode_record(User)) == USER

    def test_string_then_parse_equals_json(self):
        response = ApiResponse(status_code=200, text=USER)

        as_text = format_response(response, ReturnFormat.STRING, decode_record(User))
        as_json = format_response(response, ReturnFormat.JSON, decode_record(User))

        assert json.loads(as_text) == as_json

    def test_library_object(self):
        response = ApiResponse(status_code=200, text=USER)

        user = format_response(response, ReturnFormat.LIBRARY_OBJECT, decode_record(User))

        assert user == User(login="octocat", id=583231)

    def test_format_accepts_its_value(self):
        response = ApiResponse(status_code=200, text=USER)

        assert format_response(response, "json", decode_record(User))["login"] == "octocat"

    def test_error_body_is_returned_for_untyped_formats(self):
        response = ApiResponse(status_code=404, text='{"message":"Not Found"}')

        assert format_response(response, ReturnFormat.JSON, decode_record(User)) == {
            "message": "Not Found"
        }

    @pytest.mark.parametrize(
        ("status", "body"), [(502, "<html>Bad Gateway</html>"), (500, "")], ids=["html", "empty"]
    )
    def test_unstructured_error_body_gives_default_message(self, status, body):
        response = ApiResponse(status_code=status, text=body)

        result = format_response(response, ReturnFormat.JSON, decode_record(User))

        assert result == DEFAULT_ERROR_MESSAGE

    def test_error_raises_for_typed_format(self):
        response = ApiResponse(status_code=404, text='{"message":"Not Found"}')

        with pytest.raises(NotFoundError):
            format_response(response, ReturnFormat.LIBRARY_OBJECT, decode_record(User))

    def test_wrong_shape_is_malformed(self):
        response = ApiResponse(status_code=200, text="[]")

        with pytest.raises(MalformedPayloadError):
            format_response(response, ReturnFormat.LIBRARY_OBJECT, decode_record(User))

    def test_decoder_failures_are_normalised(self):
        def broken(tree):
            return tree["missing"]

        response = ApiResponse(status_code=200, text="{}")

        with pytest.raises(MalformedPayloadError) as exc_info:
            format_response(response, ReturnFormat.LIBRARY_OBJECT, broken)

        assert isinstance(exc_info.value.__cause__, KeyError)


class TestListDecoders:
    def test_bare_array_of_records(self):
        decoder = decode_list(decode_record(User))

        users = decoder([{"login": "a"}, {"login": "b"}])

        assert [user.login for user in users] == ["a", "b"]

    def test_list_decoder_rejects_objects(self):
        with pytest.raises(MalformedPayloadError):
            decode_list(decode_record(User))({"login": "a"})

    def test_strings(self):
        assert decode_strings(["Python", "Go"]) == ["Python", "Go"]
