"""
Oracle de capacites de decodage.

Ce module fournit CapabilityOracle, qui decide si un descripteur du
registre annonce le support d'un tuple (mime, role, profil, niveau).

Algorithme:
1. Parcours lineaire des descripteurs du role demande
2. Descripteurs ne reconnaissant pas le mime ignores
3. Pour chaque couple du bon profil, application de la strategie
   d'ordre des niveaux de la famille (voir level_ordering.py)
4. Premier couple satisfaisant -> True, sinon False

La requete est pure : pas d'I/O, pas d'exception, pas de cache.
"""

from typing import Iterable

from codec_oracle.core.ports.codec_registry import ICodecRegistry, RegistryView
from codec_oracle.core.value_objects import CodecDescriptor, CodecRole
from codec_oracle.services.level_ordering import level_ordering_for, level_satisfies


class CapabilityOracle:
    """
    Oracle de capacites sur un instantane fige du registre de codecs.

    L'instantane est capture a la construction et n'est jamais modifie :
    deux requetes identiques retournent toujours le meme resultat, et
    l'oracle peut etre partage entre appelants sans verrou.

    Example:
        oracle = CapabilityOracle(registry.descriptors())
        oracle.query(MIMETYPE_VIDEO_HEVC, CodecRole.DECODER,
                     HEVCProfileMain10, HEVCMainTierLevel5)
    """

    def __init__(self, descriptors: Iterable[CodecDescriptor]) -> None:
        """
        Initialise l'oracle avec l'instantane des descripteurs.

        Args:
            descriptors: Descripteurs annonces, dans l'ordre du registre
        """
        self._descriptors: tuple[CodecDescriptor, ...] = tuple(descriptors)

    @classmethod
    def from_registry(cls, registry: ICodecRegistry) -> "CapabilityOracle":
        """Construit un oracle sur la vue REGULAR d'un registre."""
        return cls(registry.descriptors(RegistryView.REGULAR))

    @property
    def descriptors(self) -> tuple[CodecDescriptor, ...]:
        """Instantane des descripteurs consultes par l'oracle."""
        return self._descriptors

    def query(self, mime: str, role: CodecRole, profile: int, level: int) -> bool:
        """
        Verifie si un codec du role demande supporte (mime, profil, niveau).

        Args:
            mime: Type MIME de la famille (ex: "video/hevc")
            role: DECODER ou ENCODER
            profile: Code du profil demande
            level: Code du niveau demande

        Returns:
            True si au moins un couple annonce satisfait la demande
        """
        ordering = level_ordering_for(mime)
        for descriptor in self._descriptors:
            if descriptor.role is not role:
                continue
            profile_levels = descriptor.capabilities_for(mime)
            if profile_levels is None:
                continue
            for pair in profile_levels:
                if pair.profile != profile:
                    continue
                if level_satisfies(ordering, pair.level, level):
                    return True
        return False

    def supports_mime(self, mime: str, role: CodecRole) -> bool:
        """
        Verifie si au moins un codec du role demande reconnait le mime.

        Aucun profil ni niveau n'est verifie.
        """
        return any(
            descriptor.role is role and descriptor.capabilities_for(mime) is not None
            for descriptor in self._descriptors
        )
