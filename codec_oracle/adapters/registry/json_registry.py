"""
Registre de codecs charge depuis un fichier JSON.

Le fichier decrit l'inventaire des codecs de l'appareil, tel qu'exporte
depuis la plateforme (ou ecrit a la main pour un appareil cible):

    {
      "codecs": [
        {
          "name": "c2.android.hevc.decoder",
          "mime": "video/hevc",
          "role": "decoder",
          "regular": true,
          "profile_levels": [
            {"profile": "HEVCProfileMain10", "level": "HEVCMainTierLevel5"}
          ]
        }
      ]
    }

Profils et niveaux acceptent les entiers ou les noms symboliques de
codec_constants. "regular" vaut true par defaut ; les codecs non reguliers
n'apparaissent que dans la vue ALL.
"""

import json
from pathlib import Path
from typing import Any

from loguru import logger

from codec_oracle.adapters.registry.memory_registry import InMemoryCodecRegistry
from codec_oracle.core.errors import RegistryLoadError, UnknownConstantError
from codec_oracle.core.value_objects import CodecDescriptor, CodecRole, ProfileLevel
from codec_oracle.core.value_objects.codec_constants import resolve_constant


class JsonCodecRegistry(InMemoryCodecRegistry):
    """
    Registre de codecs lu une seule fois depuis un fichier JSON.

    Raises:
        RegistryLoadError: Fichier absent, JSON invalide ou entree malformee
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path).expanduser()
        regular, extra = self._load()
        super().__init__(regular=regular, extra=extra)
        logger.debug(
            "Registre de codecs charge",
            path=str(self.path),
            regular=len(regular),
            extra=len(extra),
        )

    def _load(self) -> tuple[list[CodecDescriptor], list[CodecDescriptor]]:
        """Lit le fichier et separe codecs reguliers et supplementaires."""
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            raise RegistryLoadError("fichier introuvable", self.path) from None
        except (OSError, UnicodeDecodeError) as e:
            raise RegistryLoadError(f"lecture impossible: {e}", self.path) from e
        except json.JSONDecodeError as e:
            raise RegistryLoadError(f"JSON invalide: {e}", self.path) from e

        if not isinstance(data, dict) or not isinstance(data.get("codecs"), list):
            raise RegistryLoadError("cle 'codecs' absente ou non liste", self.path)

        regular: list[CodecDescriptor] = []
        extra: list[CodecDescriptor] = []
        for index, entry in enumerate(data["codecs"]):
            descriptor, is_regular = self._parse_codec(entry, index)
            if is_regular:
                regular.append(descriptor)
            else:
                extra.append(descriptor)
        return regular, extra

    def _parse_codec(self, entry: Any, index: int) -> tuple[CodecDescriptor, bool]:
        """Convertit une entree JSON en (CodecDescriptor, codec regulier)."""
        if not isinstance(entry, dict):
            raise RegistryLoadError(f"codec #{index}: objet attendu", self.path)

        mime = entry.get("mime")
        if not isinstance(mime, str) or not mime:
            raise RegistryLoadError(f"codec #{index}: 'mime' manquant", self.path)

        is_regular = entry.get("regular", True)
        if not isinstance(is_regular, bool):
            raise RegistryLoadError(f"codec #{index}: 'regular' doit etre un booleen", self.path)

        try:
            role = CodecRole(str(entry.get("role", "")).lower())
        except ValueError:
            raise RegistryLoadError(
                f"codec #{index}: role invalide {entry.get('role')!r}", self.path
            ) from None

        pairs = entry.get("profile_levels", [])
        if not isinstance(pairs, list):
            raise RegistryLoadError(f"codec #{index}: 'profile_levels' doit etre une liste", self.path)

        profile_levels = []
        for pair in pairs:
            try:
                profile_levels.append(
                    ProfileLevel(
                        profile=resolve_constant(pair["profile"]),
                        level=resolve_constant(pair["level"]),
                    )
                )
            except UnknownConstantError as e:
                raise RegistryLoadError(f"codec #{index}: {e}", self.path) from e
            except (KeyError, TypeError, AttributeError) as e:
                raise RegistryLoadError(
                    f"codec #{index}: couple profil/niveau invalide {pair!r}", self.path
                ) from e

        descriptor = CodecDescriptor(
            name=str(entry.get("name", f"codec-{index}")),
            mime=mime,
            role=role,
            profile_levels=tuple(profile_levels),
        )
        return descriptor, is_regular
