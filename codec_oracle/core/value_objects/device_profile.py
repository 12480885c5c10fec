"""
Objets valeur pour les profils d'appareil.

Description envoyee au serveur media de ce que l'appareil sait lire :
- DirectPlayProfile : conteneurs lus directement (photo, audio)
- CodecProfile / ProfileCondition : restrictions par codec (profil, niveau, canaux)
- TranscodingProfile : format de repli quand la lecture directe est impossible
- SubtitleProfile : mode de livraison de chaque format de sous-titres

Un flux qui viole une condition est transcode.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ProfileConditionType(Enum):
    """Operateur de comparaison d'une condition."""

    EQUALS = "Equals"
    NOT_EQUALS = "NotEquals"
    LESS_THAN_EQUAL = "LessThanEqual"
    EQUALS_ANY = "EqualsAny"


class ProfileConditionValue(Enum):
    """Propriete du flux sur laquelle porte la condition."""

    VIDEO_PROFILE = "VideoProfile"
    VIDEO_LEVEL = "VideoLevel"
    AUDIO_CHANNELS = "AudioChannels"


class CodecType(Enum):
    """Type de flux vise par un profil de codec.

    Valeurs:
        VIDEO: Piste video
        VIDEO_AUDIO: Piste audio d'un fichier video
    """

    VIDEO = "Video"
    VIDEO_AUDIO = "VideoAudio"


class DlnaProfileType(Enum):
    """Type de media d'un profil de lecture directe ou de transcodage."""

    VIDEO = "Video"
    AUDIO = "Audio"
    PHOTO = "Photo"


class SubtitleDeliveryMethod(Enum):
    """Mode de livraison des sous-titres.

    Valeurs:
        ENCODE: Incrustes dans la video (transcodage)
        EMBED: Conserves dans le conteneur
        EXTERNAL: Fichier separe
        HLS: Segments HLS
    """

    ENCODE = "Encode"
    EMBED = "Embed"
    EXTERNAL = "External"
    HLS = "Hls"


@dataclass(frozen=True)
class ProfileCondition:
    """
    Restriction sur une propriete d'un flux.

    Attributs :
        condition : Operateur (Equals, NotEquals, LessThanEqual...)
        property : Propriete comparee (VideoProfile, VideoLevel, AudioChannels)
        value : Valeur de comparaison ("Main 10", "51", "high|main")
    """

    condition: ProfileConditionType
    property: ProfileConditionValue
    value: str

    def to_dict(self) -> dict:
        """Serialise la condition au format attendu par le serveur."""
        return {
            "Condition": self.condition.value,
            "Property": self.property.value,
            "Value": self.value,
        }


@dataclass(frozen=True)
class CodecProfile:
    """
    Ensemble de conditions pour un codec donne.

    Attributs :
        codec : Nom du codec cote serveur (ex: "hevc"), None pour tous les codecs
        type : Type de flux (Video par defaut)
        conditions : Conditions a respecter pour la lecture directe
    """

    codec: Optional[str] = None
    conditions: tuple[ProfileCondition, ...] = ()
    type: CodecType = CodecType.VIDEO

    def to_dict(self) -> dict:
        """Serialise le profil au format attendu par le serveur."""
        data: dict = {"Type": self.type.value}
        if self.codec is not None:
            data["Codec"] = self.codec
        data["Conditions"] = [condition.to_dict() for condition in self.conditions]
        return data


@dataclass(frozen=True)
class DirectPlayProfile:
    """
    Conteneurs lus sans transcodage pour un type de media.

    Attributs :
        type : Type de media (Photo, Audio, Video)
        containers : Conteneurs acceptes (ex: ("jpg", "png"))
    """

    type: DlnaProfileType
    containers: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {"Type": self.type.value, "Container": ",".join(self.containers)}


@dataclass(frozen=True)
class TranscodingProfile:
    """
    Format cible quand le serveur doit transcoder.

    Attributs :
        container : Conteneur produit (ex: "mkv")
        type : Type de media
        video_codec : Codecs video acceptes, separes par des virgules
        audio_codec : Codecs audio acceptes, par ordre de preference
    """

    container: str
    type: DlnaProfileType = DlnaProfileType.VIDEO
    video_codec: str = ""
    audio_codec: str = ""

    def to_dict(self) -> dict:
        return {
            "Container": self.container,
            "Type": self.type.value,
            "VideoCodec": self.video_codec,
            "AudioCodec": self.audio_codec,
        }


@dataclass(frozen=True)
class SubtitleProfile:
    """Mode de livraison d'un format de sous-titres (ex: "srt" -> External)."""

    format: str
    method: SubtitleDeliveryMethod

    def to_dict(self) -> dict:
        return {"Format": self.format, "Method": self.method.value}


@dataclass(frozen=True)
class DeviceProfile:
    """
    Profil complet de l'appareil envoye au serveur media.

    Attributs :
        name : Nom du profil
        direct_play_profiles : Conteneurs lus directement
        transcoding_profiles : Formats de repli
        codec_profiles : Restrictions par codec
        subtitle_profiles : Livraison des sous-titres
    """

    name: str
    direct_play_profiles: tuple[DirectPlayProfile, ...] = ()
    transcoding_profiles: tuple[TranscodingProfile, ...] = ()
    codec_profiles: tuple[CodecProfile, ...] = ()
    subtitle_profiles: tuple[SubtitleProfile, ...] = ()

    def transcoding_profile(self, container: str) -> Optional[TranscodingProfile]:
        """Retourne le profil de transcodage d'un conteneur, ou None."""
        return next(
            (p for p in self.transcoding_profiles if p.container == container), None
        )

    def to_dict(self) -> dict:
        """Serialise le profil au format attendu par le serveur."""
        return {
            "Name": self.name,
            "DirectPlayProfiles": [p.to_dict() for p in self.direct_play_profiles],
            "TranscodingProfiles": [p.to_dict() for p in self.transcoding_profiles],
            "CodecProfiles": [p.to_dict() for p in self.codec_profiles],
            "SubtitleProfiles": [p.to_dict() for p in self.subtitle_profiles],
        }
