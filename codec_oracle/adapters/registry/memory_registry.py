"""
Registre de codecs en memoire.

Implementation de ICodecRegistry sur des sequences fournies a la
construction. Utilise par les tests et par JsonCodecRegistry.
"""

from typing import Iterable

from codec_oracle.core.ports.codec_registry import ICodecRegistry, RegistryView
from codec_oracle.core.value_objects import CodecDescriptor


class InMemoryCodecRegistry(ICodecRegistry):
    """
    Registre fige sur des descripteurs connus.

    La vue REGULAR contient les descripteurs reguliers ; la vue ALL y
    ajoute les descripteurs supplementaires (securises, tunneles...).
    """

    def __init__(
        self,
        regular: Iterable[CodecDescriptor] = (),
        extra: Iterable[CodecDescriptor] = (),
    ) -> None:
        self._regular = tuple(regular)
        self._all = self._regular + tuple(extra)

    def descriptors(
        self, view: RegistryView = RegistryView.REGULAR
    ) -> tuple[CodecDescriptor, ...]:
        """Retourne les descripteurs de la vue demandee."""
        if view is RegistryView.ALL:
            return self._all
        return self._regular
