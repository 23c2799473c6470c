"""
Personnel record Pydantic schemas.

Field names are the roster column names, which are also the spreadsheet
headers the importer expects.
"""

from typing import Optional
from pydantic import BaseModel, Field
from datetime import datetime


class PersonnelResponse(BaseModel):
    """A personnel record as returned by the roster endpoints."""

    id: int = Field(..., description="Record ID")
    ci: str = Field(..., description="National identity number")
    comp: Optional[str] = Field(None, description="Identity complement, null when absent")
    paterno: str = Field(..., description="Paternal surname")
    materno: Optional[str] = Field(None, description="Maternal surname")
    nombres: str = Field(..., description="Given names")
    escalafon: Optional[str] = Field(None, description="Seniority rank")
    grado: Optional[str] = Field(None, description="Grade")
    proceso: Optional[str] = Field(None, description="Process or category")
    cargo: Optional[str] = Field(None, description="Position or role")
    unidad: Optional[str] = Field(None, description="Organizational unit")
    destino: Optional[str] = Field(None, description="Destination or location")
    celular: Optional[str] = Field(None, description="Contact number")
    imported_at: Optional[datetime] = Field(None, description="Insertion timestamp")

    class Config:
        from_attributes = True
        json_schema_extra = {
            "example": {
                "id": 1,
                "ci": "4567890",
                "comp": "LP",
                "paterno": "Mamani",
                "materno": "Quispe",
                "nombres": "Juan Carlos",
                "escalafon": "1024",
                "grado": "Sargento",
                "proceso": "Operativo",
                "cargo": "Jefe de Sección",
                "unidad": "Unidad Central",
                "destino": "La Paz",
                "celular": "71234567",
                "imported_at": "2025-10-15T12:00:00Z"
            }
        }
