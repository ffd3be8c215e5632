# schemas/admin.py
"""
Pydantic schemas for admin accounts and admin login.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict, EmailStr


class AdminCreate(BaseModel):
     """Schema for provisioning an admin. Password complexity is checked separately."""
     name: str = Field(..., alias="nome", min_length=10, max_length=60)
     email: EmailStr
     password: str = Field(..., alias="senha")
     level: int = Field(..., alias="nivel", ge=1, le=5)

     model_config = ConfigDict(
          populate_by_name=True,
          json_schema_extra={
               "example": {
                    "nome": "Administrador Sistema",
                    "email": "admin@alugaaqui.com",
                    "senha": "Admin@123",
                    "nivel": 1,
               }
          }
     )


class AdminResponse(BaseModel):
     """Public admin data (no password hash)."""
     id: str
     name: str = Field(serialization_alias="nome")
     email: str
     level: int = Field(serialization_alias="nivel")
     created_at: Optional[datetime] = Field(None, serialization_alias="createdAt")

     model_config = ConfigDict(from_attributes=True)


class LoginRequest(BaseModel):
     """
     Login body. Fields are optional so a missing value gets the same
     generic answer as a wrong one.
     """
     email: Optional[str] = None
     password: Optional[str] = Field(None, alias="senha")

     model_config = ConfigDict(populate_by_name=True)


class AdminLoginResponse(BaseModel):
     id: str
     name: str = Field(serialization_alias="nome")
     email: str
     level: int = Field(serialization_alias="nivel")
     token: str
