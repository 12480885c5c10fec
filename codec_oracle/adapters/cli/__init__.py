"""
Interface ligne de commande (Typer + Rich).

- commands/ : Commandes montees sur l'application principale
- helpers.py : Console partagee, construction du container, gestion d'erreurs
"""
