"""
Couche domaine (core).

Contient les ports (interfaces abstraites), les objets valeur et les erreurs.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, frameworks, fichiers).

Sous-packages :
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- value_objects/ : Objets valeur immutables (CodecDescriptor, ProfileLevel, constantes)
"""
