"""
Construction du profil de lecture directe de l'appareil.

Traduit les capacites de decodage en profil envoye au serveur media.
Le serveur transcode tout flux qui ne respecte pas ce profil.

Elements produits:
- HEVC : exclu, limite au 8 bits, ou entierement autorise
- H.264 : niveau maximal (specifique a l'appareil) et profils acceptes
- Audio : nombre maximal de canaux, conteneurs audio lus directement
- Photo : formats d'image lus directement
- Transcodage : MKV, avec AC3 ajoute sauf si l'audio est downmixe
- Sous-titres : mode de livraison par format
"""

import dataclasses

from loguru import logger

from codec_oracle.core.value_objects import (
    CodecProfile,
    CodecType,
    DeviceProfile,
    DirectPlayProfile,
    DlnaProfileType,
    ProfileCondition,
    ProfileConditionType,
    ProfileConditionValue,
    SubtitleDeliveryMethod,
    SubtitleProfile,
    TranscodingProfile,
)
from codec_oracle.services.decoder_support import DecoderSupport

# Niveaux H.264 (https://en.wikipedia.org/wiki/Advanced_Video_Coding#Levels)
H264_LEVEL_4_1 = "41"
H264_LEVEL_5_1 = "51"
H264_LEVEL_5_2 = "52"

H264_PROFILES = ("high", "main", "baseline", "constrained baseline")

CODEC_HEVC = "hevc"
CODEC_H264 = "h264"
CODEC_AC3 = "ac3"

CONTAINER_MKV = "mkv"

PHOTO_CONTAINERS = ("jpg", "jpeg", "png", "gif", "webp")
AUDIO_CONTAINERS = ("aac", "mp3", "flac", "ogg", "opus", "wav")

# Formats texte livres a part, formats image incrustes
SUBTITLE_PROFILES = (
    ("srt", SubtitleDeliveryMethod.EXTERNAL),
    ("subrip", SubtitleDeliveryMethod.EMBED),
    ("ass", SubtitleDeliveryMethod.ENCODE),
    ("pgssub", SubtitleDeliveryMethod.ENCODE),
)

DEFAULT_MAX_AUDIO_CHANNELS = 8


class DeviceProfileBuilder:
    """
    Construit le profil de lecture directe de l'appareil.

    Attributes:
        h264_max_level: Niveau H.264 maximal lu directement (ex: "51")
        max_audio_channels: Nombre maximal de canaux audio lus directement
        downmix_audio: Si True, l'audio est downmixe en stereo (pas d'AC3)
        ac3_primary: Si True, AC3 est le codec audio transcode prefere
    """

    def __init__(
        self,
        decoder_support: DecoderSupport,
        h264_max_level: str = H264_LEVEL_5_1,
        max_audio_channels: int = DEFAULT_MAX_AUDIO_CHANNELS,
        downmix_audio: bool = False,
        ac3_primary: bool = False,
    ) -> None:
        self._decoder_support = decoder_support
        self.h264_max_level = h264_max_level
        self.max_audio_channels = max_audio_channels
        self.downmix_audio = downmix_audio
        self.ac3_primary = ac3_primary

    def hevc_codec_profile(self) -> CodecProfile:
        """
        Construit le profil HEVC selon le support de decodage.

        Returns:
            CodecProfile HEVC avec une seule condition sur VideoProfile
        """
        if not self._decoder_support.supports_hevc():
            # Aucun profil ne vaut "none" : exclut tout le HEVC
            logger.info("HEVC non supporte")
            condition = ProfileCondition(
                ProfileConditionType.EQUALS,
                ProfileConditionValue.VIDEO_PROFILE,
                "none",
            )
        elif not self._decoder_support.supports_hevc_main10():
            logger.info("HEVC 10 bits non supporte")
            condition = ProfileCondition(
                ProfileConditionType.NOT_EQUALS,
                ProfileConditionValue.VIDEO_PROFILE,
                "Main 10",
            )
        else:
            logger.info("HEVC 10 bits supporte")
            condition = ProfileCondition(
                ProfileConditionType.NOT_EQUALS,
                ProfileConditionValue.VIDEO_PROFILE,
                "none",
            )

        return CodecProfile(codec=CODEC_HEVC, type=CodecType.VIDEO, conditions=(condition,))

    def h264_level_condition(self) -> ProfileCondition:
        """Condition de niveau H.264 maximal."""
        return ProfileCondition(
            ProfileConditionType.LESS_THAN_EQUAL,
            ProfileConditionValue.VIDEO_LEVEL,
            self.h264_max_level,
        )

    def h264_profile_condition(self) -> ProfileCondition:
        """Condition sur les profils H.264 acceptes."""
        return ProfileCondition(
            ProfileConditionType.EQUALS_ANY,
            ProfileConditionValue.VIDEO_PROFILE,
            "|".join(H264_PROFILES),
        )

    def h264_codec_profile(self) -> CodecProfile:
        """Construit le profil H.264 (profils acceptes + niveau maximal)."""
        return CodecProfile(
            codec=CODEC_H264,
            type=CodecType.VIDEO,
            conditions=(self.h264_profile_condition(), self.h264_level_condition()),
        )

    @staticmethod
    def max_audio_channels_codec_profile(channels: int) -> CodecProfile:
        """Limite le nombre de canaux audio des fichiers video, tous codecs."""
        return CodecProfile(
            type=CodecType.VIDEO_AUDIO,
            conditions=(
                ProfileCondition(
                    ProfileConditionType.LESS_THAN_EQUAL,
                    ProfileConditionValue.AUDIO_CHANNELS,
                    str(channels),
                ),
            ),
        )

    @staticmethod
    def photo_direct_play_profile() -> DirectPlayProfile:
        """Formats d'image lus directement."""
        return DirectPlayProfile(type=DlnaProfileType.PHOTO, containers=PHOTO_CONTAINERS)

    @staticmethod
    def audio_direct_play_profile(*containers: str) -> DirectPlayProfile:
        """Conteneurs audio lus directement."""
        return DirectPlayProfile(type=DlnaProfileType.AUDIO, containers=containers)

    @staticmethod
    def subtitle_profile(subtitle_format: str, method: SubtitleDeliveryMethod) -> SubtitleProfile:
        """Mode de livraison d'un format de sous-titres."""
        return SubtitleProfile(format=subtitle_format, method=method)

    def codec_profiles(self) -> tuple[CodecProfile, ...]:
        """Retourne tous les profils de codecs de l'appareil."""
        return (
            self.hevc_codec_profile(),
            self.h264_codec_profile(),
            self.max_audio_channels_codec_profile(self.max_audio_channels),
        )

    def add_ac3_streaming(self, profile: DeviceProfile, primary: bool) -> DeviceProfile:
        """
        Ajoute AC3 aux codecs audio du transcodage MKV.

        Sans effet si l'audio est downmixe ou si le profil n'a pas de
        transcodage MKV.

        Args:
            profile: Profil de l'appareil
            primary: True pour placer AC3 en tete, False en fin de liste

        Returns:
            Nouveau profil (le profil d'origine n'est pas modifie)
        """
        if self.downmix_audio:
            return profile

        mkv_profile = profile.transcoding_profile(CONTAINER_MKV)
        if mkv_profile is None:
            return profile

        logger.info("AC3 ajoute aux codecs audio transcodes", primary=primary)
        codecs = [mkv_profile.audio_codec] if mkv_profile.audio_codec else []
        if primary:
            codecs.insert(0, CODEC_AC3)
        else:
            codecs.append(CODEC_AC3)
        updated = dataclasses.replace(mkv_profile, audio_codec=",".join(codecs))
        return dataclasses.replace(
            profile,
            transcoding_profiles=tuple(
                updated if p is mkv_profile else p for p in profile.transcoding_profiles
            ),
        )

    def device_profile(self) -> DeviceProfile:
        """Assemble le profil complet de l'appareil."""
        profile = DeviceProfile(
            name="CodecOracle",
            direct_play_profiles=(
                self.photo_direct_play_profile(),
                self.audio_direct_play_profile(*AUDIO_CONTAINERS),
            ),
            transcoding_profiles=(
                TranscodingProfile(
                    container=CONTAINER_MKV,
                    type=DlnaProfileType.VIDEO,
                    video_codec=CODEC_H264,
                    audio_codec="aac,mp3",
                ),
            ),
            codec_profiles=self.codec_profiles(),
            subtitle_profiles=tuple(
                self.subtitle_profile(subtitle_format, method)
                for subtitle_format, method in SUBTITLE_PROFILES
            ),
        )
        return self.add_ac3_streaming(profile, primary=self.ac3_primary)
