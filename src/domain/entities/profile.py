"""Profile domain entities."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def new_profile_id() -> str:
    """Generate an opaque profile ID (random 128-bit UUID4)."""
    return str(uuid4())


@dataclass
class Coordinates:
    """Map position of an address. ``(0, 0)`` means unset."""

    lat: float = 0.0
    lng: float = 0.0

    @property
    def is_unset(self) -> bool:
        return self.lat == 0 and self.lng == 0


@dataclass
class Address:
    """Postal address with map coordinates."""

    street: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    zip_code: str = ""
    coordinates: Coordinates = field(default_factory=Coordinates)


@dataclass
class Contact:
    """Contact details for a profile."""

    email: str = ""
    phone: str = ""


@dataclass
class ProfileFormData:
    """Editable content of a profile, submitted for both create and update."""

    name: str = ""
    description: str = ""
    image: str = ""
    address: Address = field(default_factory=Address)
    contact: Contact = field(default_factory=Contact)
    interests: list[str] = field(default_factory=list)


@dataclass
class Profile:
    """Domain entity for a directory profile.

    ``id`` and ``created_at`` are assigned once by the repository; everything
    else is content and is replaced wholesale on update.
    """

    name: str
    description: str = ""
    image: str = ""
    address: Address = field(default_factory=Address)
    contact: Contact = field(default_factory=Contact)
    interests: list[str] = field(default_factory=list)
    id: str = field(default_factory=new_profile_id)
    created_at: datetime = field(default_factory=utcnow)

    @classmethod
    def from_form(
        cls,
        form: ProfileFormData,
        id: str | None = None,
        created_at: datetime | None = None,
    ) -> "Profile":
        """Build a profile from form data, generating identity when not given."""
        return cls(
            name=form.name,
            description=form.description,
            image=form.image,
            address=form.address,
            contact=form.contact,
            interests=list(form.interests),
            id=id or new_profile_id(),
            created_at=created_at or utcnow(),
        )

    def apply(self, form: ProfileFormData) -> None:
        """Replace all content fields with ``form``, keeping identity."""
        self.name = form.name
        self.description = form.description
        self.image = form.image
        self.address = form.address
        self.contact = form.contact
        self.interests = list(form.interests)

    def to_form(self) -> ProfileFormData:
        """Content of this profile as form data (for pre-filling edits)."""
        return ProfileFormData(
            name=self.name,
            description=self.description,
            image=self.image,
            address=self.address,
            contact=self.contact,
            interests=list(self.interests),
        )


@dataclass
class ProfileFilters:
    """Criteria used to derive the visible subset of profiles."""

    search_term: str = ""
    location: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.search_term and not self.location
