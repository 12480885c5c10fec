"""
Constantes des familles de codecs video.

Types MIME, profils et niveaux tels qu'annonces par la plateforme de
decodage (valeurs de MediaCodecInfo.CodecProfileLevel). Les profils et
niveaux sont des bitmasks a un seul bit : la comparaison numerique suit
l'ordre des niveaux, sauf pour H.263 (voir services/level_ordering.py).

Le dictionnaire PROFILE_LEVEL_CONSTANTS permet d'utiliser les noms
symboliques dans les fichiers de registre et en ligne de commande.
"""

from typing import Union

from codec_oracle.core.errors import UnknownConstantError

# ====================
# Types MIME
# ====================

MIMETYPE_VIDEO_AVC = "video/avc"
MIMETYPE_VIDEO_HEVC = "video/hevc"
MIMETYPE_VIDEO_H263 = "video/3gpp"
MIMETYPE_VIDEO_MPEG4 = "video/mp4v-es"
MIMETYPE_VIDEO_VP8 = "video/x-vnd.on2.vp8"
MIMETYPE_VIDEO_VP9 = "video/x-vnd.on2.vp9"
MIMETYPE_VIDEO_AV1 = "video/av01"


# ====================
# AVC / H.264
# ====================

AVCProfileBaseline = 0x01
AVCProfileMain = 0x02
AVCProfileExtended = 0x04
AVCProfileHigh = 0x08
AVCProfileHigh10 = 0x10
AVCProfileHigh422 = 0x20
AVCProfileHigh444 = 0x40
AVCProfileConstrainedBaseline = 0x10000
AVCProfileConstrainedHigh = 0x80000

AVCLevel1 = 0x01
AVCLevel1b = 0x02
AVCLevel11 = 0x04
AVCLevel12 = 0x08
AVCLevel13 = 0x10
AVCLevel2 = 0x20
AVCLevel21 = 0x40
AVCLevel22 = 0x80
AVCLevel3 = 0x100
AVCLevel31 = 0x200
AVCLevel32 = 0x400
AVCLevel4 = 0x800
AVCLevel41 = 0x1000
AVCLevel42 = 0x2000
AVCLevel5 = 0x4000
AVCLevel51 = 0x8000
AVCLevel52 = 0x10000
AVCLevel6 = 0x20000
AVCLevel61 = 0x40000
AVCLevel62 = 0x80000


# ====================
# HEVC / H.265
# ====================

HEVCProfileMain = 0x01
HEVCProfileMain10 = 0x02
HEVCProfileMainStill = 0x04
HEVCProfileMain10HDR10 = 0x1000
HEVCProfileMain10HDR10Plus = 0x2000

HEVCMainTierLevel1 = 0x1
HEVCHighTierLevel1 = 0x2
HEVCMainTierLevel2 = 0x4
HEVCHighTierLevel2 = 0x8
HEVCMainTierLevel21 = 0x10
HEVCHighTierLevel21 = 0x20
HEVCMainTierLevel3 = 0x40
HEVCHighTierLevel3 = 0x80
HEVCMainTierLevel31 = 0x100
HEVCHighTierLevel31 = 0x200
HEVCMainTierLevel4 = 0x400
HEVCHighTierLevel4 = 0x800
HEVCMainTierLevel41 = 0x1000
HEVCHighTierLevel41 = 0x2000
HEVCMainTierLevel5 = 0x4000
HEVCHighTierLevel5 = 0x8000
HEVCMainTierLevel51 = 0x10000
HEVCHighTierLevel51 = 0x20000
HEVCMainTierLevel52 = 0x40000
HEVCHighTierLevel52 = 0x80000
HEVCMainTierLevel6 = 0x100000
HEVCHighTierLevel6 = 0x200000
HEVCMainTierLevel61 = 0x400000
HEVCHighTierLevel61 = 0x800000
HEVCMainTierLevel62 = 0x1000000
HEVCHighTierLevel62 = 0x2000000


# ====================
# H.263
# ====================

H263ProfileBaseline = 0x01
H263ProfileH320Coding = 0x02
H263ProfileBackwardCompatible = 0x04
H263ProfileISWV2 = 0x08
H263ProfileISWV3 = 0x10
H263ProfileHighCompression = 0x20
H263ProfileInternet = 0x40
H263ProfileInterlace = 0x80
H263ProfileHighLatency = 0x100

H263Level10 = 0x01
H263Level20 = 0x02
H263Level30 = 0x04
H263Level40 = 0x08
H263Level45 = 0x10
H263Level50 = 0x20
H263Level60 = 0x40
H263Level70 = 0x80


PROFILE_LEVEL_CONSTANTS: dict[str, int] = {
    name: value
    for name, value in globals().items()
    if name.startswith(("AVC", "HEVC", "H263")) and isinstance(value, int)
}


def resolve_constant(value: Union[int, str]) -> int:
    """
    Convertit un profil/niveau (entier ou nom symbolique) en entier.

    Les chaines numeriques ("2048", "0x800") sont aussi acceptees.

    Args:
        value: Entier, nom symbolique (ex: "AVCLevel4") ou chaine numerique

    Returns:
        Valeur entiere du profil ou du niveau

    Raises:
        UnknownConstantError: Si le nom symbolique n'existe pas
    """
    if isinstance(value, bool):
        raise UnknownConstantError(str(value))
    if isinstance(value, int):
        return value

    text = value.strip()
    if text in PROFILE_LEVEL_CONSTANTS:
        return PROFILE_LEVEL_CONSTANTS[text]
    try:
        return int(text, 0)
    except ValueError:
        raise UnknownConstantError(text) from None
