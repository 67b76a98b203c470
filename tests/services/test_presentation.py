"""Tests for nationality and athlete display lookups."""

from trackrecords.services.presentation import athlete_url, country_code, flag_emoji


class TestCountryCode:
    def test_default_table(self):
        """Look up 'Jamaica' -> 'JM' from the default table."""
        assert country_code("Jamaica") == "JM"
        assert country_code("United States") == "US"
        assert country_code("USA") == "US"

    def test_unknown(self):
        """Unknown nationality returns None."""
        assert country_code("Atlantis") is None

    def test_injected_lookup_replaces_default(self):
        """An injected mapping replaces the default table entirely."""
        lookup = {"Atlantis": "AQ"}
        assert country_code("Atlantis", lookup) == "AQ"
        assert country_code("Jamaica", lookup) is None

    def test_strips_whitespace(self):
        """Surrounding whitespace is ignored."""
        assert country_code(" Kenya ") == "KE"


class TestFlagEmoji:
    def test_two_letter_code(self):
        """Build 'KE' from two regional indicator symbols."""
        assert flag_emoji("KE") == "\U0001f1f0\U0001f1ea"

    def test_lowercase_code(self):
        """Lowercase codes give the same flag."""
        assert flag_emoji("jm") == flag_emoji("JM")

    def test_unknown(self):
        """Missing or malformed codes give an empty string."""
        assert flag_emoji(None) == ""
        assert flag_emoji("") == ""
        assert flag_emoji("USA") == ""


class TestAthleteUrl:
    def test_spaces_become_underscores(self):
        """Link 'Usain Bolt' -> '.../wiki/Usain_Bolt'."""
        assert athlete_url("Usain Bolt") == "https://en.wikipedia.org/wiki/Usain_Bolt"

    def test_collapses_whitespace(self):
        """Repeated and surrounding whitespace collapses to one underscore."""
        assert athlete_url(" Hicham  El Guerrouj ") == (
            "https://en.wikipedia.org/wiki/Hicham_El_Guerrouj"
        )

    def test_non_ascii_is_quoted(self):
        """Non-ASCII letters are percent-encoded."""
        assert athlete_url("Kenenisa Bekelé").endswith("Kenenisa_Bekel%C3%A9")
