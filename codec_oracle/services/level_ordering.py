"""
Strategies d'ordre des niveaux par famille de codecs.

Pour la plupart des familles, supporter le niveau N implique supporter
tous les niveaux <= N (ordre monotone). H.263 fait exception : un codec
annoncant Level45 ne garantit que Level10, pas les niveaux intermediaires
(Level20, Level30, Level40).

Ajouter une famille non monotone se fait ici, sans toucher a la boucle
de l'oracle.
"""

from enum import Enum

from codec_oracle.core.value_objects.codec_constants import (
    H263Level10,
    H263Level45,
    MIMETYPE_VIDEO_H263,
)


class LevelOrdering(Enum):
    """Semantique d'ordre des niveaux d'une famille.

    Valeurs:
        MONOTONIC: Le support du niveau N couvre tous les niveaux inferieurs
        H263: Level45 ne couvre que Level10 et lui-meme
    """

    MONOTONIC = "monotonic"
    H263 = "h263"


# Familles non monotones, indexees par mime en minuscules
_ORDERING_BY_MIME: dict[str, LevelOrdering] = {
    MIMETYPE_VIDEO_H263: LevelOrdering.H263,
}


def level_ordering_for(mime: str) -> LevelOrdering:
    """Retourne la strategie d'ordre des niveaux pour un mime."""
    return _ORDERING_BY_MIME.get(mime.lower(), LevelOrdering.MONOTONIC)


def level_satisfies(
    ordering: LevelOrdering, supported_level: int, requested_level: int
) -> bool:
    """
    Determine si un niveau annonce couvre le niveau demande.

    Args:
        ordering: Strategie de la famille du codec
        supported_level: Niveau annonce par le descripteur
        requested_level: Niveau demande par l'appelant

    Returns:
        True si le niveau annonce couvre le niveau demande
    """
    if ordering is LevelOrdering.H263:
        if (
            supported_level != requested_level
            and supported_level == H263Level45
            and requested_level > H263Level10
        ):
            return False
    return supported_level >= requested_level
