#!/usr/bin/env python3
# frs_admin/core/services/base.py
"""
Service de base avec helpers communs pour tous les services métier.
"""

from frs_admin.core.exceptions import ExceptionCode, NotFoundError, PermissionError
from frs_admin.core.utils.permissions import can_manage_app, can_read_app
from frs_admin.database.models import Application


class BaseService:
    """Classe de base pour tous les services métier."""

    @staticmethod
    async def check_app_access(app_guid: str, user_id: int, write: bool = False) -> Application:
        """
        Vérifie qu'un utilisateur peut accéder à une application.

        Args:
            app_guid: guid de l'application
            user_id: ID de l'utilisateur
            write: True pour une opération de modification

        Returns:
            L'application trouvée

        Raises:
            NotFoundError: Si l'application n'existe pas
            PermissionError: Si le rôle de l'utilisateur ne suffit pas
        """
        from frs_admin.database import crud

        app_row = await crud.get_application(app_guid)
        if not app_row:
            raise NotFoundError(
                f"Application {app_guid} not found",
                code=ExceptionCode.APP_NOT_FOUND
            )

        application = Application.from_row(app_row)
        role = await crud.get_app_member_role(application.id, user_id)

        allowed = can_manage_app(role) if write else can_read_app(role)
        if not allowed:
            raise PermissionError("Access denied")

        return application
