import string

import pytest

from pkce_std.errors import CharacterError
from pkce_std.primitives import chars


class TestAlphabet:
    def test_alphabet_has_66_unique_characters(self):
        # Assert
        assert chars.LENGTH == 66
        assert len(set(chars.CHARS)) == 66

    def test_alphabet_is_alphanumeric_plus_special(self):
        # Arrange
        expected = set(string.ascii_letters + string.digits + "-._~")

        # Assert
        assert set(chars.CHARS) == expected

    def test_every_alphabet_character_is_valid(self):
        # Assert
        assert all(chars.is_valid(c) for c in chars.CHARS)

    @pytest.mark.parametrize("character", ["-", ".", "_", "~"])
    def test_special_characters(self, character):
        # Assert
        assert chars.is_special(character)
        assert chars.is_valid(character)

    @pytest.mark.parametrize("character", ["a", "Z", "0", "/", "+", "=", " "])
    def test_non_special_characters(self, character):
        # Assert
        assert not chars.is_special(character)

    def test_validity_matches_alphabet_across_latin1(self):
        # Arrange & Act & Assert
        for code_point in range(256):
            character = chr(code_point)
            assert chars.is_valid(character) == (character in chars.CHARS)


class TestCheck:
    def test_valid_string_passes(self):
        # Arrange
        value = "SSBsb3ZlIHdyaXRpbmcgb3BlbiBzb3VyY2Ugc29mdHdhcmUhIF4uXiB-IG5la2l0"

        # Act & Assert
        chars.check(value)
        assert chars.is_valid_string(value)
        assert chars.find_invalid(value) is None

    def test_empty_string_has_no_invalid_characters(self):
        # Assert
        assert chars.find_invalid("") is None

    def test_reports_first_invalid_character(self):
        # Act
        with pytest.raises(CharacterError) as exc_info:
            chars.check("nekitdev/pkce-std+more")

        # Assert
        assert exc_info.value.character == "/"
        assert exc_info.value.position == 8

    def test_non_ascii_is_invalid_character(self):
        # Act
        with pytest.raises(CharacterError) as exc_info:
            chars.check("abcé")

        # Assert
        assert exc_info.value.character == "é"
        assert exc_info.value.position == 3

    def test_find_invalid_returns_position_and_character(self):
        # Act
        result = chars.find_invalid("ab cd")

        # Assert
        assert result == (2, " ")
        assert not chars.is_valid_string("ab cd")
