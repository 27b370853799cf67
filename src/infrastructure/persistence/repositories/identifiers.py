"""
Conversion des identifiants du domaine (str) en cles primaires SQLite (int).
"""

from typing import Optional


def parse_id(value: Optional[str]) -> Optional[int]:
    """
    Convertit un ID de domaine en cle primaire entiere.

    Retourne :
        L'entier correspondant, ou None si la valeur est vide ou non numerique
        (aucune ligne ne peut alors correspondre)
    """
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
