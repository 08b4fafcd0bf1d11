# frs_admin/database/crud/__init__.py
# Point d'entrée unique pour toutes les fonctions CRUD

from .users import get_user

from .applications import (
    get_application,
    get_app_member_role
)

from .models import (
    create_model,
    get_model,
    get_model_by_name,
    list_models_by_app,
    update_model,
    update_model_api_key,
    delete_model
)
