"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports registre : Contrats d'accès à l'inventaire des codecs
- ICodecRegistry : Énumération des descripteurs de codecs
- RegistryView : Vue d'énumération (REGULAR, ALL)
"""

from codec_oracle.core.ports.codec_registry import (
    ICodecRegistry,
    RegistryView,
)

__all__ = [
    "ICodecRegistry",
    "RegistryView",
]
