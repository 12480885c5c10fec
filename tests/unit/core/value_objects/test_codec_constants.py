"""
Tests unitaires pour les constantes de profils/niveaux.
"""

import pytest

from codec_oracle.core.errors import CodecOracleError, UnknownConstantError
from codec_oracle.core.value_objects.codec_constants import (
    AVCLevel4,
    H263Level10,
    H263Level20,
    H263Level45,
    HEVCMainTierLevel5,
    PROFILE_LEVEL_CONSTANTS,
    resolve_constant,
)


class TestResolveConstant:
    """Tests pour resolve_constant."""

    def test_integer_is_returned_unchanged(self) -> None:
        assert resolve_constant(2048) == 2048

    def test_symbolic_name(self) -> None:
        """Un nom symbolique est converti en sa valeur."""
        assert resolve_constant("AVCLevel4") == AVCLevel4
        assert resolve_constant("HEVCMainTierLevel5") == HEVCMainTierLevel5

    def test_decimal_and_hex_strings(self) -> None:
        assert resolve_constant("2048") == AVCLevel4
        assert resolve_constant("0x800") == AVCLevel4

    def test_surrounding_spaces_are_ignored(self) -> None:
        assert resolve_constant("  H263Level45 ") == H263Level45

    def test_unknown_name_raises(self) -> None:
        """Un nom inconnu leve UnknownConstantError (aussi KeyError)."""
        with pytest.raises(UnknownConstantError) as exc_info:
            resolve_constant("HEVCProfileMain12")
        assert exc_info.value.name == "HEVCProfileMain12"
        assert isinstance(exc_info.value, KeyError)
        assert isinstance(exc_info.value, CodecOracleError)

    def test_boolean_is_rejected(self) -> None:
        with pytest.raises(UnknownConstantError):
            resolve_constant(True)


class TestConstantTable:
    """Tests pour PROFILE_LEVEL_CONSTANTS."""

    def test_contains_all_families(self) -> None:
        assert "AVCProfileHigh10" in PROFILE_LEVEL_CONSTANTS
        assert "HEVCProfileMain10" in PROFILE_LEVEL_CONSTANTS
        assert "H263ProfileBaseline" in PROFILE_LEVEL_CONSTANTS

    def test_excludes_mime_types(self) -> None:
        assert not any(name.startswith("MIMETYPE") for name in PROFILE_LEVEL_CONSTANTS)

    def test_h263_level45_sits_above_intermediate_levels(self) -> None:
        """Level45 est numeriquement superieur a Level20 (d'ou l'exception H.263)."""
        assert H263Level10 < H263Level20 < H263Level45
