"""Tests for token string encoding and decoding."""

import pytest

from pasetokit.types import (
    ErrorKind,
    FormatError,
    Purpose,
    UnsupportedPurposeError,
    UnsupportedVersionError,
    Version,
)
from pasetokit.wire import decode_token, encode_token, extract_footer, header


class TestNames:
    """Test parsing of version and purpose names."""

    def test_version_ignores_case(self) -> None:
        assert Version.from_string("V2") is Version.V2

    def test_purpose_is_case_sensitive(self) -> None:
        with pytest.raises(UnsupportedPurposeError):
            Purpose.from_string("Local")

    @pytest.mark.parametrize("value", [None, 1, b"v1", ["v1"]])
    def test_version_rejects_non_string(self, value) -> None:
        with pytest.raises(UnsupportedVersionError) as exc_info:
            Version.from_string(value)
        assert exc_info.value.kind is ErrorKind.UNSUPPORTED_VERSION

    @pytest.mark.parametrize("value", [None, 1, b"public", ["public"]])
    def test_purpose_rejects_non_string(self, value) -> None:
        with pytest.raises(UnsupportedPurposeError) as exc_info:
            Purpose.from_string(value)
        assert exc_info.value.kind is ErrorKind.UNSUPPORTED_PURPOSE


class TestHeader:
    """Test header construction."""

    @pytest.mark.parametrize("version,purpose,expected", [
        (Version.V1, Purpose.LOCAL, b"v1.local."),
        (Version.V1, Purpose.PUBLIC, b"v1.public."),
        (Version.V2, Purpose.LOCAL, b"v2.local."),
        (Version.V2, Purpose.PUBLIC, b"v2.public."),
    ])
    def test_header(self, version: Version, purpose: Purpose, expected: bytes) -> None:
        assert header(version, purpose) == expected


class TestEncodeToken:
    """Test token serialization."""

    def test_without_footer(self) -> None:
        token = encode_token(Version.V2, Purpose.LOCAL, b"abc")
        assert token == "v2.local.YWJj"

    def test_with_footer(self) -> None:
        token = encode_token(Version.V1, Purpose.PUBLIC, b"abc", b"kid:1")
        assert token == "v1.public.YWJj.a2lkOjE"

    def test_empty_footer_is_omitted(self) -> None:
        token = encode_token(Version.V2, Purpose.PUBLIC, b"abc", b"")
        assert token.count(".") == 2


class TestDecodeToken:
    """Test token parsing (no verification)."""

    def test_three_fields(self) -> None:
        parts = decode_token("v2.local.YWJj")
        assert parts.version is Version.V2
        assert parts.purpose is Purpose.LOCAL
        assert parts.body == b"abc"
        assert parts.footer is None

    def test_four_fields(self) -> None:
        parts = decode_token("v1.public.YWJj.a2lkOjE")
        assert parts.version is Version.V1
        assert parts.purpose is Purpose.PUBLIC
        assert parts.body == b"abc"
        assert parts.footer == b"kid:1"

    def test_empty_footer_field(self) -> None:
        parts = decode_token("v2.local.YWJj.")
        assert parts.footer == b""

    def test_bytes_token(self) -> None:
        parts = decode_token(b"v2.local.YWJj")
        assert parts.body == b"abc"

    def test_version_case_insensitive(self) -> None:
        assert decode_token("V2.local.YWJj").version is Version.V2

    def test_purpose_case_sensitive(self) -> None:
        with pytest.raises(UnsupportedPurposeError):
            decode_token("v2.Local.YWJj")

    @pytest.mark.parametrize("token", [
        "",
        "v2",
        "v2.local",
        "v2.local.YWJj.YWJj.YWJj",
        "v2.local.YWJj.YWJj.YWJj.YWJj",
    ])
    def test_wrong_field_count(self, token: str) -> None:
        with pytest.raises(FormatError) as exc_info:
            decode_token(token)
        assert exc_info.value.kind is ErrorKind.FORMAT

    def test_unsupported_version(self) -> None:
        with pytest.raises(UnsupportedVersionError) as exc_info:
            decode_token("v3.local.AAAA")
        assert exc_info.value.kind is ErrorKind.UNSUPPORTED_VERSION
        assert exc_info.value.version == "v3"

    def test_unsupported_purpose(self) -> None:
        with pytest.raises(UnsupportedPurposeError) as exc_info:
            decode_token("v2.secret.AAAA")
        assert exc_info.value.kind is ErrorKind.UNSUPPORTED_PURPOSE
        assert exc_info.value.purpose == "secret"

    def test_version_checked_before_base64(self) -> None:
        with pytest.raises(UnsupportedVersionError):
            decode_token("v9.local.not*base64")

    def test_invalid_payload_base64(self) -> None:
        with pytest.raises(FormatError):
            decode_token("v2.local.YWJj==")

    def test_invalid_footer_base64(self) -> None:
        with pytest.raises(FormatError):
            decode_token("v2.local.YWJj.a2lk+jE")

    def test_non_ascii_bytes(self) -> None:
        with pytest.raises(FormatError, match="ASCII"):
            decode_token(b"v2.local.\xff")

    def test_rejects_other_types(self) -> None:
        with pytest.raises(TypeError):
            decode_token(42)


class TestExtractFooter:
    """Test unverified footer extraction."""

    def test_footer_present(self) -> None:
        assert extract_footer("v2.local.YWJj.a2lkOjE") == b"kid:1"

    def test_footer_absent(self) -> None:
        assert extract_footer("v2.public.YWJj") is None

    def test_malformed(self) -> None:
        with pytest.raises(FormatError):
            extract_footer("v2.local")
