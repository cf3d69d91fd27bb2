from uuid import uuid4

import pytest

from anchorly.domain.validation import (
    FieldError,
    is_email,
    is_url,
    is_utf8,
    is_uuid,
    length,
    required,
    validate,
    validate_new_link,
    validate_new_user,
)


class TestRules:
    @pytest.mark.parametrize("value", [None, ""])
    def test_required_rejects_missing(self, value: object) -> None:
        assert required(value) is not None

    def test_required_accepts_whitespace(self) -> None:
        # Blank-but-present values are left to the length rule.
        assert required("   ") is None

    def test_length_is_inclusive(self) -> None:
        rule = length(4, 6)

        assert rule("abcd") is None
        assert rule("abcdef") is None
        assert rule("abc") is not None
        assert rule("abcdefg") is not None

    def test_length_counts_characters_not_bytes(self) -> None:
        assert length(4, 4)("ññññ") is None

    def test_rules_skip_empty_values(self) -> None:
        assert length(4, 6)("") is None
        assert is_email("") is None
        assert is_url(None) is None
        assert is_uuid("") is None
        assert is_utf8("") is None

    def test_utf8_rejects_lone_surrogates(self) -> None:
        assert is_utf8("ñandú") is None
        assert is_utf8("longpass\ud800") == "must be valid UTF-8 text"

    @pytest.mark.parametrize("value", ["a@example.com", "first.last+tag@sub.example.org"])
    def test_email_accepts(self, value: str) -> None:
        assert is_email(value) is None

    @pytest.mark.parametrize("value", ["plain", "a@", "@example.com", "a b@example.com"])
    def test_email_rejects(self, value: str) -> None:
        assert is_email(value) is not None

    @pytest.mark.parametrize(
        "value", ["https://example.com", "http://example.com/a?b=c#d", "ftp://files.example.com"]
    )
    def test_url_accepts(self, value: str) -> None:
        assert is_url(value) is None

    @pytest.mark.parametrize(
        "value", ["example", "/just/a/path", "https://", "https://exa mple.com", "http//x.com"]
    )
    def test_url_rejects(self, value: str) -> None:
        assert is_url(value) is not None

    def test_uuid(self) -> None:
        value = str(uuid4())

        assert is_uuid(value) is None
        assert is_uuid(value.upper()) is None
        assert is_uuid(value.replace("-", "")) is not None
        assert is_uuid("not-a-uuid") is not None


class TestValidate:
    def test_first_failing_rule_wins(self) -> None:
        error = validate("username", "", required, length(4, 250))

        assert error == FieldError(
            field="username", message="username is invalid", reason="cannot be blank"
        )

    def test_custom_message(self) -> None:
        error = validate("user", "x", is_uuid, message="user is required")

        assert error is not None
        assert error.message == "user is required"

    def test_passes(self) -> None:
        assert validate("username", "alice01", required, length(4, 250)) is None


class TestGroupValidators:
    def test_valid_user(self) -> None:
        assert validate_new_user("alice01", "a@example.com", "longpassword1") is None

    @pytest.mark.parametrize(
        "username,email,password,field",
        [
            ("ab", "bad", "short", "username"),
            ("alice01", "bad", "short", "email"),
            ("alice01", "a@example.com", "short", "password"),
            ("alice\udfff", "a@example.com", "longpassword1", "username"),
            ("alice01", "a@example.com", "longpass\ud800", "password"),
        ],
    )
    def test_user_order(self, username: str, email: str, password: str, field: str) -> None:
        error = validate_new_user(username, email, password)

        assert error is not None
        assert error.field == field

    def test_valid_link(self) -> None:
        assert validate_new_link("Docs", "https://example.com", str(uuid4())) is None

    @pytest.mark.parametrize(
        "title,href,user_id,field",
        [
            ("no", "bad", "bad", "title"),
            ("Docs", "bad", "bad", "href"),
            ("Docs", "https://example.com", "bad", "user"),
            ("Docs\ud800", "https://example.com", "bad", "title"),
            ("Docs", "https://example.com/\ud800", "bad", "href"),
        ],
    )
    def test_link_order(self, title: str, href: str, user_id: str, field: str) -> None:
        error = validate_new_link(title, href, user_id)

        assert error is not None
        assert error.field == field
