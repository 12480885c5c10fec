"""
Configuration du logging via loguru.

Les services passent le contexte d'une decision en kwargs (mime, profile,
level, primary...). Ces valeurs arrivent dans record["extra"] :
- Console : ajoutees en fin de ligne sous la forme cle=valeur
- Fichier : serialisees en JSON avec le reste de l'enregistrement
"""

import sys
from pathlib import Path

from loguru import logger

_CONSOLE_PREFIX = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def _console_format(record: dict) -> str:
    """Gabarit console : message suivi du contexte de la decision."""
    extras = "".join(f" <dim>{key}={{extra[{key}]}}</dim>" for key in record["extra"])
    return _CONSOLE_PREFIX + extras + "\n{exception}"


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/codec_oracle.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau minimum pour la console (DEBUG, INFO, WARNING, ERROR)
        log_file : Fichier JSON des decisions
        rotation_size : Taille maximale avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs conserves
    """
    logger.remove()

    logger.add(sys.stderr, level=log_level, format=_console_format, colorize=True)

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug("Logging configure", log_file=str(log_file), rotation=rotation_size)
