"""
Couche services (cas d'utilisation).

- CapabilityOracle : Requete de support (mime, role, profil, niveau)
- DecoderSupport : Predicats nommes (HEVC, HEVC Main10, AVC High10)
- DeviceProfileBuilder : Conditions de lecture directe de l'appareil
"""

from codec_oracle.services.capability_oracle import CapabilityOracle
from codec_oracle.services.decoder_support import DecoderSupport
from codec_oracle.services.device_profile import DeviceProfileBuilder
from codec_oracle.services.level_ordering import LevelOrdering, level_ordering_for

__all__ = [
    "CapabilityOracle",
    "DecoderSupport",
    "DeviceProfileBuilder",
    "LevelOrdering",
    "level_ordering_for",
]
