"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Sous-packages :
- cli/ : Interface ligne de commande (Typer)
- registry/ : Inventaire des codecs (mémoire, fichier JSON)

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""

from codec_oracle.adapters.registry import InMemoryCodecRegistry, JsonCodecRegistry

__all__ = [
    "InMemoryCodecRegistry",
    "JsonCodecRegistry",
]
