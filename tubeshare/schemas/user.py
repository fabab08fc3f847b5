# ============================================================================
# FILE: tubeshare/schemas/user.py
# ============================================================================
from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime

def normalize_email(email: str) -> str:
    """Emails are stored and looked up lower-cased"""
    return email.strip().lower()

class RegisterRequest(BaseModel):
    """Schema for user registration"""
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    email: EmailStr
    password: str
    image: Optional[str] = None
    
    @field_validator("email")
    @classmethod
    def lower_email(cls, value: str) -> str:
        return normalize_email(value)
    
    class Config:
        populate_by_name = True

class LoginRequest(BaseModel):
    """Schema for user login (email kept as plain str so failures stay generic)"""
    email: str
    password: str
    
    @field_validator("email")
    @classmethod
    def lower_email(cls, value: str) -> str:
        return normalize_email(value)

class SubscribeRequest(BaseModel):
    subscribe_id: int = Field(alias="subscribeId")
    
    class Config:
        populate_by_name = True

class UserBase(BaseModel):
    """Public user fields; the password hash is never part of a response"""
    id: int
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    email: str
    image: Optional[str] = None
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    
    class Config:
        from_attributes = True
        populate_by_name = True

class TokenPayload(BaseModel):
    """Claims carried by an access token"""
    id: int
