from unittest.mock import patch

import pytest

from pkce_std.errors import CharacterError, CountError, LengthError, VerifierError
from pkce_std.models.length import Count, Length
from pkce_std.models.method import Method
from pkce_std.models.verifier import Verifier
from pkce_std.primitives import chars

DOCS_VERIFIER = "dGhhbmtzIGZvciByZWFkaW5nIGRvY3MhIH4gbmVraXQ"
DOCS_BYTES = b"thanks for reading docs! ~ nekit"


class TestVerifierConstruction:
    @pytest.mark.parametrize("length", [43, 86, 128])
    def test_accepts_valid_lengths(self, length):
        # Act
        verifier = Verifier("a" * length)

        # Assert
        assert len(verifier) == length
        assert verifier.as_str() == "a" * length

    @pytest.mark.parametrize("length", [0, 42, 129])
    def test_rejects_invalid_lengths(self, length):
        # Act
        with pytest.raises(VerifierError) as exc_info:
            Verifier("a" * length)

        # Assert
        assert isinstance(exc_info.value.error, LengthError)
        assert exc_info.value.error.value == length

    def test_rejects_invalid_character(self):
        # Arrange
        value = "a" * 20 + "/" + "b" * 30

        # Act
        with pytest.raises(VerifierError) as exc_info:
            Verifier.from_string(value)

        # Assert
        error = exc_info.value.error
        assert isinstance(error, CharacterError)
        assert error.character == "/"
        assert error.position == 20
        assert exc_info.value.__cause__ is error

    def test_length_checked_before_characters(self):
        # Act
        with pytest.raises(VerifierError) as exc_info:
            Verifier("/" * 10)

        # Assert
        assert isinstance(exc_info.value.error, LengthError)

    def test_rejects_non_string(self):
        # Act & Assert
        with pytest.raises(TypeError):
            Verifier(b"a" * 43)

    def test_is_immutable(self):
        # Arrange
        verifier = Verifier.generate_default()

        # Act & Assert
        with pytest.raises(AttributeError):
            verifier.value = "b" * 43

    def test_repr_hides_secret(self):
        # Arrange
        verifier = Verifier(DOCS_VERIFIER)

        # Assert
        assert DOCS_VERIFIER not in repr(verifier)
        assert str(verifier) == DOCS_VERIFIER


class TestVerifierGeneration:
    @pytest.mark.parametrize("length", [43, 64, 86, 100, 128])
    def test_generate_length_and_alphabet(self, length):
        # Act
        verifier = Verifier.generate(Length(length))

        # Assert
        assert len(verifier) == length
        assert chars.is_valid_string(verifier.as_str())

    def test_generate_default(self):
        # Act
        verifier = Verifier.generate_default()

        # Assert
        assert len(verifier) == 86
        assert len(Verifier.generate()) == 86

    def test_generated_verifiers_differ(self):
        # Act & Assert
        assert Verifier.generate_default() != Verifier.generate_default()

    @pytest.mark.parametrize("count", [32, 33, 34, 64, 96])
    def test_generate_from_bytes(self, count):
        # Act
        verifier = Verifier.generate_from_bytes(Count(count))

        # Assert
        assert len(verifier) == Count(count).encoded()
        assert chars.is_valid_string(verifier.as_str())

    def test_generate_from_bytes_uses_random_bytes(self):
        # Arrange
        with patch(
            "pkce_std.models.verifier.random_bytes", return_value=DOCS_BYTES
        ) as mock_random:
            # Act
            verifier = Verifier.generate_from_bytes(Count(32))

        # Assert
        mock_random.assert_called_once_with(Count(32))
        assert verifier == Verifier(DOCS_VERIFIER)

    def test_generate_from_bytes_default(self):
        # Act & Assert
        assert len(Verifier.generate_from_bytes()) == 86

    def test_generate_accepts_plain_int(self):
        # Act
        verifier = Verifier.generate(43)

        # Assert
        assert len(verifier) == 43

    def test_generate_from_bytes_accepts_plain_int(self):
        # Act
        verifier = Verifier.generate_from_bytes(32)

        # Assert
        assert len(verifier) == 43

    def test_generate_rejects_out_of_range_int(self):
        # Act & Assert
        with pytest.raises(LengthError):
            Verifier.generate(42)
        with pytest.raises(CountError):
            Verifier.generate_from_bytes(97)


class TestVerifierEncoding:
    def test_encode_known_bytes(self):
        # Act
        verifier = Verifier.encode_from_bytes(DOCS_BYTES)

        # Assert
        assert verifier == Verifier(DOCS_VERIFIER)

    @pytest.mark.parametrize("size", [0, 31, 97])
    def test_encode_rejects_invalid_byte_count(self, size):
        # Act
        with pytest.raises(CountError) as exc_info:
            Verifier.encode_from_bytes(b"\x00" * size)

        # Assert
        assert exc_info.value.value == size

    @pytest.mark.parametrize("size", [32, 96])
    def test_encode_accepts_boundaries(self, size):
        # Act & Assert
        assert len(Verifier.encode_from_bytes(b"\xff" * size)) == Count(size).encoded()


class TestVerifierEquality:
    def test_equal_content_is_equal(self):
        # Assert
        assert Verifier(DOCS_VERIFIER) == Verifier(DOCS_VERIFIER)
        assert hash(Verifier(DOCS_VERIFIER)) == hash(Verifier(DOCS_VERIFIER))

    def test_not_equal_to_plain_string(self):
        # Assert
        assert Verifier(DOCS_VERIFIER) != DOCS_VERIFIER

    def test_comparison_is_constant_time(self):
        # Arrange
        first = Verifier("a" * 43)
        second = Verifier("a" * 42 + "b")

        # Act
        with patch(
            "pkce_std.models.verifier.secrets.compare_digest", return_value=False
        ) as mock_compare:
            result = first == second

        # Assert
        assert result is False
        mock_compare.assert_called_once_with(b"a" * 43, b"a" * 42 + b"b")


class TestVerifierChallenge:
    @pytest.mark.parametrize("method", list(Method))
    def test_verify_own_challenge(self, method):
        # Arrange
        verifier = Verifier.generate_default()

        # Act
        challenge = verifier.derive_challenge(method)

        # Assert
        assert verifier.verify(challenge)

    def test_default_challenge_uses_sha256(self):
        # Arrange
        verifier = Verifier.generate_default()

        # Act & Assert
        assert verifier.challenge().method() is Method.SHA256
        assert verifier.derive_challenge().method() is Method.SHA256

    def test_verify_rejects_other_verifier_challenge(self):
        # Arrange
        verifier = Verifier.generate_default()
        other = Verifier.generate_default()

        # Act & Assert
        assert not verifier.verify(other.challenge())
        assert not verifier.verify(other.derive_challenge(Method.PLAIN))

    def test_distinct_verifiers_have_distinct_challenges(self):
        # Arrange
        verifiers = [Verifier.generate(Length.minimum()) for _ in range(200)]

        # Act
        secrets = {v.derive_challenge(Method.SHA256).secret() for v in verifiers}

        # Assert
        assert len(secrets) == len(set(verifiers))
