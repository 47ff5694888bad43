"""Pydantic schemas for profile endpoints."""

from datetime import date
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from ..domain.profiles.models import Gender, Height, Profile


class HeightSchema(BaseModel):
    """Height in feet and inches (inches 0-11)."""
    feet: int = Field(..., ge=0, le=9)
    inches: int = Field(0, ge=0, le=11)

    class Config:
        from_attributes = True


class ProfileCreate(BaseModel):
    """Schema for creating the caller's profile."""
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    dob: date
    height: HeightSchema
    gender: Gender
    religion: Optional[str] = None
    community: Optional[str] = None
    community_preference: Optional[str] = None
    marital_status: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    contact: Optional[str] = None
    time_of_birth: Optional[str] = None
    place_of_birth: Optional[str] = None

    def to_domain(self, email: str) -> Profile:
        return Profile(
            email=email,
            first_name=self.first_name,
            last_name=self.last_name,
            gender=self.gender,
            dob=self.dob,
            height=Height(feet=self.height.feet, inches=self.height.inches),
            religion=self.religion,
            community=self.community,
            community_preference=self.community_preference,
            marital_status=self.marital_status,
            city=self.city,
            state=self.state,
            country=self.country,
            contact=self.contact,
            time_of_birth=self.time_of_birth,
            place_of_birth=self.place_of_birth,
        )


class ProfileResponse(BaseModel):
    """Schema for profile responses."""
    id: UUID
    email: str
    first_name: str
    last_name: Optional[str]
    gender: Optional[Gender]
    dob: Optional[date]
    height: Optional[HeightSchema]
    religion: Optional[str]
    community: Optional[str]
    community_preference: Optional[str]
    marital_status: Optional[str]
    city: Optional[str]
    state: Optional[str]
    country: Optional[str]
    contact: Optional[str]
    time_of_birth: Optional[str]
    place_of_birth: Optional[str]

    class Config:
        from_attributes = True


class ProfileCreateResponse(BaseModel):
    message: str
    profile: ProfileResponse
