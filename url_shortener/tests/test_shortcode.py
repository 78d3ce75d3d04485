"""Tests for short code generation."""

import string

import pytest
from url_shortener.lib.errors import RandomSourceError
from url_shortener.lib.shortcode import ShortCodeGenerator


class TestShortCodeGenerator:
    """Test short code generation."""

    def test_generate_random(self):
        """Test random code generation."""
        generator = ShortCodeGenerator(default_length=6)

        code = generator.generate_random()
        assert len(code) == 6
        assert all(c in string.ascii_letters + string.digits for c in code)

    def test_generate_random_custom_length(self):
        """Test random code with custom length."""
        generator = ShortCodeGenerator(default_length=6)

        code = generator.generate_random(length=10)
        assert len(code) == 10
        assert all(c in ShortCodeGenerator.BASE62_CHARS for c in code)

    def test_alphabet_is_base62(self):
        assert len(ShortCodeGenerator.BASE62_CHARS) == 62
        assert set(ShortCodeGenerator.BASE62_CHARS) == set(string.ascii_letters + string.digits)

    def test_codes_vary(self):
        """Consecutive codes are drawn independently."""
        generator = ShortCodeGenerator(default_length=8)

        codes = {generator.generate_random() for _ in range(50)}
        assert len(codes) > 1

    def test_restricted_alphabet(self):
        generator = ShortCodeGenerator(default_length=3, alphabet="x")

        assert generator.generate_random() == "xxx"

    def test_injected_choice(self):
        picks = iter("abc")
        generator = ShortCodeGenerator(default_length=3, choice=lambda alphabet: next(picks))

        assert generator.generate_random() == "abc"

    def test_random_source_failure_raises(self):
        """A failing random source is reported, never papered over."""
        def broken_choice(alphabet):
            raise OSError("entropy unavailable")

        generator = ShortCodeGenerator(choice=broken_choice)

        with pytest.raises(RandomSourceError, match="entropy unavailable"):
            generator.generate_random()

    @pytest.mark.parametrize("kwargs", [{"default_length": 0}, {"alphabet": ""}])
    def test_invalid_configuration(self, kwargs):
        with pytest.raises(ValueError):
            ShortCodeGenerator(**kwargs)
