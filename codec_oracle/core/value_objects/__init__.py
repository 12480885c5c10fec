"""
Objets valeur immutables representant des concepts du domaine sans identite.

Les objets valeur sont definis par leurs attributs plutot que par une identite.
Ils sont immutables et peuvent etre librement partages et compares par valeur.

Exports :
- CodecRole : Role d'un codec (DECODER, ENCODER)
- ProfileLevel : Couple (profil, niveau) supporte
- CodecDescriptor : Implementation de codec annoncee par la plateforme
- ProfileCondition, CodecProfile : Conditions de lecture directe par codec
- DirectPlayProfile, TranscodingProfile, SubtitleProfile : Elements du profil
- DeviceProfile : Profil complet envoye au serveur media
"""

from codec_oracle.core.value_objects.codec_descriptor import (
    CodecDescriptor,
    CodecRole,
    ProfileLevel,
)
from codec_oracle.core.value_objects.device_profile import (
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

__all__ = [
    "CodecRole",
    "ProfileLevel",
    "CodecDescriptor",
    "CodecProfile",
    "CodecType",
    "DeviceProfile",
    "DirectPlayProfile",
    "DlnaProfileType",
    "ProfileCondition",
    "ProfileConditionType",
    "ProfileConditionValue",
    "SubtitleDeliveryMethod",
    "SubtitleProfile",
    "TranscodingProfile",
]
