"""Tests for tile identity strings."""

import pytest
from sprite_sheet_codec.identity import IdentityError, SpriteIdentity


def test_identity_to_string():
    identity = SpriteIdentity("hero", 3, 64, 48)
    assert identity.to_string() == "hero.3.64.48"
    assert str(identity) == "hero.3.64.48"


def test_identity_parse():
    identity = SpriteIdentity.parse("hero.3.64.48")
    assert identity == SpriteIdentity("hero", 3, 64, 48)


def test_identity_parse_round_trip():
    for identity in [SpriteIdentity("a", 0, 1, 1), SpriteIdentity("tile_set-01", 120, 999, 12)]:
        assert SpriteIdentity.parse(identity.to_string()) == identity


@pytest.mark.parametrize("text", ["abc", "a.1.2", "a.1.2.3.4", ""])
def test_identity_parse_wrong_field_count(text):
    """Identity strings need exactly four dot-separated fields."""
    with pytest.raises(IdentityError, match="Mis-formatted"):
        SpriteIdentity.parse(text)


@pytest.mark.parametrize("text", ["a.x.2.3", "a.1.two.3", "a.1.2.", "a.1.2.3px"])
def test_identity_parse_non_numeric(text):
    with pytest.raises(IdentityError, match="Non-numeric"):
        SpriteIdentity.parse(text)


@pytest.mark.parametrize("text", ["a.-1.2.3", "a.0.0.3", "a.0.3.0", ".0.3.3"])
def test_identity_parse_out_of_range(text):
    with pytest.raises(IdentityError):
        SpriteIdentity.parse(text)


def test_identity_rejects_dotted_name():
    with pytest.raises(IdentityError):
        SpriteIdentity("a.b", 0, 1, 1)


def test_identity_error_is_value_error():
    with pytest.raises(ValueError):
        SpriteIdentity.parse("abc")


@pytest.mark.parametrize("text", ["hero.1_0.64.64", "hero.0.+64.64", "hero.0.64. 64", "hero.0.64.6 4", "hero.0.٣.64"])
def test_identity_parse_requires_plain_digits(text):
    """Numeric fields are ASCII base-10 digits only."""
    with pytest.raises(IdentityError, match="Non-numeric"):
        SpriteIdentity.parse(text)


def test_identity_parse_accepts_leading_zeros():
    assert SpriteIdentity.parse("hero.007.64.64").index == 7
