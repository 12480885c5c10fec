"""
Exceptions du domaine CodecOracle.

Seules les erreurs de construction (chargement du registre, noms de
constantes inconnus) sont des exceptions. Une requete de capacite ne
leve jamais : un mime non reconnu ou l'absence de correspondance sont
des resultats normaux.
"""

from pathlib import Path
from typing import Optional


class CodecOracleError(Exception):
    """Exception de base pour les erreurs de CodecOracle."""


class RegistryLoadError(CodecOracleError):
    """
    Exception levee quand le registre de codecs ne peut pas etre charge.

    Attributes:
        path: Fichier source du registre, ou None pour un registre en memoire
        reason: Description courte du probleme
    """

    def __init__(self, reason: str, path: Optional[Path] = None) -> None:
        self.path = path
        self.reason = reason
        location = f" ({path})" if path is not None else ""
        super().__init__(f"Registre de codecs invalide{location}: {reason}")


class UnknownConstantError(CodecOracleError, KeyError):
    """
    Exception levee quand un nom symbolique de profil/niveau est inconnu.

    Attributes:
        name: Nom symbolique demande (ex: "HEVCProfileMain12")
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Constante de profil/niveau inconnue: {self.name}"
