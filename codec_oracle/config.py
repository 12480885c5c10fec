"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe CODEC_ORACLE_,
et peut optionnellement être fournie via un fichier .env.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de codec_oracle/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe CODEC_ORACLE_.
    Exemple : CODEC_ORACLE_REGISTRY_FILE=~/devices/shield.json

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="CODEC_ORACLE_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Inventaire des codecs de l'appareil
    registry_file: Path = Field(default=Path("codecs.json"))

    # Niveau H.264 maximal en lecture directe (41 pour Fire TV, 52 pour Fire TV Stick 4K)
    h264_max_level: str = Field(default="51", pattern=r"^\d{2}$")

    # Audio en lecture directe et au transcodage
    max_audio_channels: int = Field(default=8, ge=1, le=8)
    downmix_audio: bool = Field(default=False)
    ac3_primary: bool = Field(default=False)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/codec_oracle.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5, ge=1)

    @field_validator("registry_file", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Normalise le niveau de log en majuscules."""
        return v.upper()
