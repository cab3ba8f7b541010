"""Pydantic schemas for Profile API."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from domain.entities.profile import Address, Contact, Coordinates, ProfileFormData


class CoordinatesSchema(BaseModel):
    """Map position. Both zero means the position was never entered."""

    model_config = ConfigDict(from_attributes=True)

    lat: float = 0.0
    lng: float = 0.0


class AddressSchema(BaseModel):
    """Postal address with coordinates."""

    model_config = ConfigDict(from_attributes=True)

    street: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    zip_code: str = ""
    coordinates: CoordinatesSchema = Field(default_factory=CoordinatesSchema)


class ContactSchema(BaseModel):
    """Contact details."""

    model_config = ConfigDict(from_attributes=True)

    email: str = ""
    phone: str = ""


class ProfileForm(BaseModel):
    """Schema for creating or replacing a Profile.

    Only shapes are checked here; content rules (required fields, email
    format, coordinates) are enforced by the domain validator so every
    failing field is reported at once.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Ana Souza",
                "description": "Landscape architect and weekend cyclist",
                "image": "https://i.pravatar.cc/200?u=ana",
                "address": {
                    "street": "12 Beacon St",
                    "city": "Boston",
                    "state": "Massachusetts",
                    "country": "United States",
                    "zip_code": "02108",
                    "coordinates": {"lat": 42.3584, "lng": -71.0598},
                },
                "contact": {"email": "ana@example.com", "phone": "(617) 555-0100"},
                "interests": ["cycling", "gardening"],
            }
        },
    )

    name: str = ""
    description: str = ""
    image: str = ""
    address: AddressSchema = Field(default_factory=AddressSchema)
    contact: ContactSchema = Field(default_factory=ContactSchema)
    interests: list[str] = Field(default_factory=list)

    def to_domain(self) -> ProfileFormData:
        """Convert to the domain form data."""
        return ProfileFormData(
            name=self.name,
            description=self.description,
            image=self.image,
            address=Address(
                street=self.address.street,
                city=self.address.city,
                state=self.address.state,
                country=self.address.country,
                zip_code=self.address.zip_code,
                coordinates=Coordinates(
                    lat=self.address.coordinates.lat,
                    lng=self.address.coordinates.lng,
                ),
            ),
            contact=Contact(email=self.contact.email, phone=self.contact.phone),
            interests=list(self.interests),
        )


class ProfileResponse(BaseModel):
    """Schema for Profile response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str
    image: str
    address: AddressSchema
    contact: ContactSchema
    interests: list[str]
    created_at: datetime


class ProfileListResponse(BaseModel):
    """Schema for list of Profiles."""

    data: list[ProfileResponse]
    total: int


class ProfileDetailResponse(BaseModel):
    """Schema for single Profile."""

    data: ProfileResponse


class ProfileDeleteResponse(BaseModel):
    """Schema for a settled delete."""

    deleted: bool


class SelectionUpdate(BaseModel):
    """Schema for changing the selected profile (null clears it)."""

    profile_id: str | None = None


class SelectionResponse(BaseModel):
    """Schema for the selected profile, if any."""

    data: ProfileResponse | None
