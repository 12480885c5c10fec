"""
Tests unitaires pour CodecDescriptor.

Tests de la recherche de capacites par mime (resultat optionnel).
"""

import dataclasses

import pytest

from codec_oracle.core.value_objects import CodecDescriptor, CodecRole, ProfileLevel
from codec_oracle.core.value_objects.codec_constants import (
    HEVCMainTierLevel5,
    HEVCProfileMain10,
    MIMETYPE_VIDEO_AVC,
    MIMETYPE_VIDEO_HEVC,
)


class TestCapabilitiesFor:
    """Tests pour CodecDescriptor.capabilities_for."""

    def test_returns_pairs_for_served_mime(self, hevc_main10_decoder: CodecDescriptor) -> None:
        """Le mime servi retourne les couples annonces."""
        pairs = hevc_main10_decoder.capabilities_for(MIMETYPE_VIDEO_HEVC)
        assert pairs == (ProfileLevel(HEVCProfileMain10, HEVCMainTierLevel5),)

    def test_returns_none_for_other_mime(self, hevc_main10_decoder: CodecDescriptor) -> None:
        """Un mime d'une autre famille retourne None, sans exception."""
        assert hevc_main10_decoder.capabilities_for(MIMETYPE_VIDEO_AVC) is None

    def test_mime_comparison_is_case_insensitive(self, hevc_main10_decoder: CodecDescriptor) -> None:
        """Les types MIME sont compares sans tenir compte de la casse."""
        assert hevc_main10_decoder.capabilities_for("VIDEO/HEVC") is not None

    def test_served_mime_without_pairs_returns_empty_tuple(self) -> None:
        """Un codec sans couple annonce reconnait quand meme son mime."""
        descriptor = CodecDescriptor(
            name="bare", mime=MIMETYPE_VIDEO_AVC, role=CodecRole.DECODER
        )
        assert descriptor.capabilities_for(MIMETYPE_VIDEO_AVC) == ()


class TestCodecDescriptorValue:
    """Tests de la semantique objet valeur."""

    def test_is_immutable(self, hevc_main10_decoder: CodecDescriptor) -> None:
        """Les attributs ne peuvent pas etre modifies."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            hevc_main10_decoder.mime = MIMETYPE_VIDEO_AVC  # type: ignore[misc]

    def test_equality_by_content(self, hevc_main10_decoder: CodecDescriptor) -> None:
        """Deux descripteurs de meme contenu sont egaux."""
        copy = dataclasses.replace(hevc_main10_decoder)
        assert copy == hevc_main10_decoder
        assert hash(copy) == hash(hevc_main10_decoder)

