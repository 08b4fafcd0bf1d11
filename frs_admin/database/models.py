from dataclasses import dataclass
from typing import Optional
from datetime import datetime

@dataclass
class User:
    id: int
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    @classmethod
    def from_row(cls, row) -> "User":
        return cls(
            id=row['id'],
            email=row['email'],
            first_name=row.get('first_name'),
            last_name=row.get('last_name')
        )

@dataclass
class Application:
    id: int
    guid: str
    name: str
    created_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row) -> "Application":
        return cls(
            id=row['id'],
            guid=row['guid'],
            name=row['name'],
            created_at=row.get('created_at')
        )

@dataclass
class Model:
    """Modèle de reconnaissance faciale, rattaché à une seule application."""
    name: str
    type: Optional[str] = None
    guid: Optional[str] = None
    api_key: Optional[str] = None
    app_id: Optional[int] = None
    id: Optional[int] = None
    created_date: Optional[datetime] = None

    @classmethod
    def from_row(cls, row) -> "Model":
        return cls(
            id=row['id'],
            guid=row['guid'],
            name=row['name'],
            type=row['type'],
            api_key=row['api_key'],
            app_id=row['app_id'],
            created_date=row.get('created_date')
        )
