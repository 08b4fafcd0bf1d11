import uuid

def generate_guid() -> str:
    """
    Génère un identifiant externe opaque (UUID4).

    Returns:
        guid au format 8-4-4-4-12
        Exemple: 3f1c2a9e-5b7d-4e0f-9a41-0c6d2b8e7f15
    """
    return str(uuid.uuid4())

def generate_api_key() -> str:
    """Génère une nouvelle clé API de modèle."""
    return str(uuid.uuid4())
