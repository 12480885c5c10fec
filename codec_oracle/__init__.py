"""
CodecOracle - Capacites de decodage video de l'appareil.

Ce package repond a une seule question : "le sous-systeme de decodage
peut-il decoder un flux de la famille M, profil P, niveau L ?".
La reponse permet de choisir entre lecture directe et transcodage.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (objets valeur, ports, erreurs)
- services/ : Couche application (oracle, predicats nommes, profil appareil)
- adapters/ : Couche infrastructure (CLI, registre de codecs)
"""

__version__ = "0.1.0"
