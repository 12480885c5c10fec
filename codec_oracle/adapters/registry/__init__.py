"""
Adaptateurs de registre de codecs.

Ce package contient les implementations concretes de ICodecRegistry:
- InMemoryCodecRegistry: Descripteurs fournis a la construction
- JsonCodecRegistry: Inventaire lu depuis un fichier JSON
"""

from codec_oracle.adapters.registry.json_registry import JsonCodecRegistry
from codec_oracle.adapters.registry.memory_registry import InMemoryCodecRegistry

__all__ = [
    "InMemoryCodecRegistry",
    "JsonCodecRegistry",
]
