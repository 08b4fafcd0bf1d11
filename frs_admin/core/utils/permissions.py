"""Utilitaires de gestion des permissions sur les applications."""

from enum import Enum
from typing import Optional


class AppRole(str, Enum):
    OWNER = "OWNER"
    ADMINISTRATOR = "ADMINISTRATOR"
    USER = "USER"


def can_read_app(role: Optional[str]) -> bool:
    """
    Vérifie si un rôle permet de consulter les modèles d'une application.

    Tout membre de l'application, quel que soit son rôle, peut lire.
    """
    return role in {r.value for r in AppRole}


def can_manage_app(role: Optional[str]) -> bool:
    """
    Vérifie si un rôle permet de créer, modifier ou supprimer des modèles.

    Args:
        role: Rôle de l'utilisateur dans l'application (None si non membre)

    Returns:
        True pour OWNER et ADMINISTRATOR, False sinon
    """
    return role in (AppRole.OWNER.value, AppRole.ADMINISTRATOR.value)
