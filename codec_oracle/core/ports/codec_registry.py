"""
Interface port pour le registre de codecs de la plateforme.

Le registre enumere les implementations de codecs installees. L'enumeration
concrete depend de la plateforme et reste hors du domaine : le domaine ne
voit qu'une sequence figee de CodecDescriptor.
"""

from abc import ABC, abstractmethod
from enum import Enum

from codec_oracle.core.value_objects import CodecDescriptor


class RegistryView(Enum):
    """Vue d'enumeration du registre.

    Valeurs:
        REGULAR: Codecs utilisables pour la lecture normale
        ALL: Tous les codecs, y compris securises/tunneles
    """

    REGULAR = "regular"
    ALL = "all"


class ICodecRegistry(ABC):
    """
    Interface pour l'acces aux descripteurs de codecs.

    Les implementations chargent l'inventaire une seule fois ; chaque appel
    retourne la meme sequence ordonnee.
    """

    @abstractmethod
    def descriptors(
        self, view: RegistryView = RegistryView.REGULAR
    ) -> tuple[CodecDescriptor, ...]:
        """
        Retourne les descripteurs de la vue demandee.

        Args:
            view: Vue d'enumeration (REGULAR par defaut)

        Retourne:
            Tuple ordonne des descripteurs
        """
        ...
