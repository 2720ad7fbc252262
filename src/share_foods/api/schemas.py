"""Pydantic models for API request payloads."""

from datetime import date as date_type
from uuid import UUID

from pydantic import BaseModel, Field


class ListingCreate(BaseModel):
    """New food listing payload."""

    user_id: UUID
    title: str = Field(min_length=1)
    description: str | None = None
    image_url: str | None = None
    quantity: float = Field(default=0, ge=0)
    unit: str | None = None
    category: str | None = None
    listing_type: str | None = "donation"
    expiry_date: str | None = None
    donor_name: str | None = None
    donor_email: str | None = None
    donor_phone: str | None = None
    donor_occupation: str | None = None
    donor_city: str | None = None
    donor_state: str | None = None
    donor_zip: str | None = None
    donor_type: str | None = None
    latitude: float | None = None
    longitude: float | None = None


class ListingUpdate(BaseModel):
    """Partial listing update payload."""

    title: str | None = None
    description: str | None = None
    image_url: str | None = None
    quantity: float | None = Field(default=None, ge=0)
    unit: str | None = None
    category: str | None = None
    expiry_date: str | None = None
    latitude: float | None = None
    longitude: float | None = None


class ClaimCreate(BaseModel):
    """New claim payload."""

    food_id: UUID
    user_id: UUID | None = None
    requester_name: str | None = None
    requester_email: str | None = None
    people: int = Field(default=0, ge=0)
    school_staff: int = Field(default=0, ge=0)
    students: int = Field(default=0, ge=0)
    members_count: int = Field(default=0, ge=0)


class StatusUpdate(BaseModel):
    """Moderation status change."""

    status: str


class ClaimReview(BaseModel):
    """Admin decision on a claim."""

    approve: bool


class ImpactRecordCreate(BaseModel):
    """Manual impact entry payload."""

    date: date_type
    food_saved_kg: float = Field(default=0, ge=0)
    people_helped: int = Field(default=0, ge=0)
    meals_provided: float = Field(default=0, ge=0)
    co2_reduced_kg: float = Field(default=0, ge=0)
    waste_diverted_kg: float = Field(default=0, ge=0)
    volunteer_hours: float = Field(default=0, ge=0)
    partner_organizations: int = Field(default=0, ge=0)
    notes: str | None = None
    created_by: UUID | None = None


class ImpactRecordUpdate(BaseModel):
    """Partial impact entry update."""

    date: date_type | None = None
    food_saved_kg: float | None = Field(default=None, ge=0)
    people_helped: int | None = Field(default=None, ge=0)
    meals_provided: float | None = Field(default=None, ge=0)
    co2_reduced_kg: float | None = Field(default=None, ge=0)
    waste_diverted_kg: float | None = Field(default=None, ge=0)
    volunteer_hours: float | None = Field(default=None, ge=0)
    partner_organizations: int | None = Field(default=None, ge=0)
    notes: str | None = None


class ChatRequest(BaseModel):
    """Free-form assistant question."""

    message: str
    context: str = ""


class RecipeRequest(BaseModel):
    """Ingredients to cook with."""

    ingredients: list[str]


class FoodRequest(BaseModel):
    """A single food name."""

    food: str


class ImpactEstimateRequest(BaseModel):
    """Amount of food to estimate savings for."""

    food_type: str
    quantity: float = Field(ge=0)
    unit: str = "kg"
