"""
Predicats nommes de support des decodeurs.

Raccourcis a arguments fixes au-dessus de CapabilityOracle, tous
restreints au role DECODER. Utilises pour construire le profil de
l'appareil (voir device_profile.py).
"""

from loguru import logger

from codec_oracle.core.value_objects import CodecRole
from codec_oracle.core.value_objects.codec_constants import (
    AVCLevel4,
    AVCProfileHigh10,
    HEVCMainTierLevel5,
    HEVCProfileMain10,
    MIMETYPE_VIDEO_AVC,
    MIMETYPE_VIDEO_HEVC,
)
from codec_oracle.services.capability_oracle import CapabilityOracle


class DecoderSupport:
    """Predicats de support de decodage pour les familles courantes."""

    def __init__(self, oracle: CapabilityOracle) -> None:
        self._oracle = oracle

    def has_decoder(self, mime: str, profile: int, level: int) -> bool:
        """Verifie si un decodeur supporte (mime, profil, niveau)."""
        return self._oracle.query(mime, CodecRole.DECODER, profile, level)

    def check_decoder(self, mime: str, profile: int, level: int) -> bool:
        """
        Comme has_decoder, avec une trace INFO en cas d'absence.

        La trace n'influe pas sur le resultat.
        """
        if not self.has_decoder(mime, profile, level):
            logger.info(
                "Aucun decodeur {mime} pour le profil {profile} et le niveau {level}",
                mime=mime,
                profile=profile,
                level=level,
            )
            return False
        return True

    def supports_hevc(self) -> bool:
        """Verifie si un decodeur HEVC est present, tous profils confondus."""
        return self._oracle.supports_mime(MIMETYPE_VIDEO_HEVC, CodecRole.DECODER)

    def supports_hevc_main10(self) -> bool:
        """Verifie le support HEVC Main10 (10 bits) au niveau Main tier 5."""
        return self.has_decoder(MIMETYPE_VIDEO_HEVC, HEVCProfileMain10, HEVCMainTierLevel5)

    def supports_avc_high10(self) -> bool:
        """Verifie le support AVC High10 au niveau 4."""
        return self.has_decoder(MIMETYPE_VIDEO_AVC, AVCProfileHigh10, AVCLevel4)
