"""Profiles domain module - profile records, candidate predicate, ProfileStore port."""

from .models import Gender, Height, Profile, normalize_identity
from .predicate import (
    AgeBound,
    AgeDirection,
    CandidatePredicate,
    HeightBound,
    HeightDirection,
    calendar_age,
)
from .ports import ProfileStore

__all__ = [
    "Gender",
    "Height",
    "Profile",
    "normalize_identity",
    "AgeBound",
    "AgeDirection",
    "CandidatePredicate",
    "HeightBound",
    "HeightDirection",
    "calendar_age",
    "ProfileStore",
]
