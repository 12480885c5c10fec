"""
Objets valeur pour les descripteurs de codecs.

Objets valeur immutables representant les implementations de codecs
annoncees par la plateforme. Tous les objets valeur utilisent
@dataclass(frozen=True) pour garantir l'immutabilite.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CodecRole(Enum):
    """Role d'une implementation de codec.

    Valeurs:
        DECODER: Decodeur (lecture)
        ENCODER: Encodeur (capture, transcodage local)
    """

    DECODER = "decoder"
    ENCODER = "encoder"


@dataclass(frozen=True)
class ProfileLevel:
    """
    Couple (profil, niveau) supporte par un codec.

    Attributs :
        profile : Code entier du profil (ex: HEVCProfileMain10)
        level : Code entier du niveau maximal supporte pour ce profil
    """

    profile: int
    level: int


@dataclass(frozen=True)
class CodecDescriptor:
    """
    Implementation de codec annoncee par la plateforme.

    Attributs :
        name : Nom de l'implementation (ex: "c2.android.hevc.decoder")
        mime : Type MIME de la famille servie (ex: "video/hevc")
        role : Decodeur ou encodeur
        profile_levels : Couples (profil, niveau) annonces pour ce mime
    """

    name: str
    mime: str
    role: CodecRole
    profile_levels: tuple[ProfileLevel, ...] = ()

    def serves(self, mime: str) -> bool:
        """Verifie si ce descripteur reconnait le mime (insensible a la casse)."""
        return self.mime.lower() == mime.lower()

    def capabilities_for(self, mime: str) -> Optional[tuple[ProfileLevel, ...]]:
        """
        Retourne les couples (profil, niveau) annonces pour un mime.

        Un descripteur ne sert qu'une famille : pour tout autre mime,
        le resultat est None (cas attendu et frequent, pas une erreur).

        Args:
            mime: Type MIME demande

        Returns:
            Tuple des couples supportes, ou None si le mime n'est pas reconnu
        """
        if not self.serves(mime):
            return None
        return self.profile_levels
