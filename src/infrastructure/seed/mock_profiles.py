"""Deterministic mock profiles for seeding the directory."""

import random
from datetime import datetime, timedelta, timezone
from uuid import UUID

from domain.entities.profile import Address, Contact, Coordinates, Profile

FIRST_NAMES = (
    "Ava", "Liam", "Maya", "Noah", "Zoe", "Ethan", "Chloe", "Lucas",
    "Isla", "Mason", "Nora", "Caleb", "Ruby", "Owen", "Hazel", "Eli",
)
LAST_NAMES = (
    "Bennett", "Carter", "Delgado", "Ellis", "Foster", "Garcia", "Hayes",
    "Ibarra", "Jensen", "Kim", "Lopez", "Morgan", "Nguyen", "Ortiz", "Patel",
)
CITIES = (
    ("Portland", "Oregon", "97205"),
    ("Austin", "Texas", "73301"),
    ("Denver", "Colorado", "80202"),
    ("Boston", "Massachusetts", "02108"),
    ("Savannah", "Georgia", "31401"),
    ("Madison", "Wisconsin", "53703"),
    ("Tucson", "Arizona", "85701"),
    ("Raleigh", "North Carolina", "27601"),
    ("Boise", "Idaho", "83702"),
    ("Richmond", "Virginia", "23219"),
)
STREET_NAMES = ("Oak", "Maple", "Cedar", "Pine", "Elm", "Lake", "Hill", "Park")
STREET_SUFFIXES = ("Street", "Avenue", "Road", "Lane", "Drive")
INTERESTS = (
    "hiking", "photography", "cooking", "chess", "gardening", "cycling",
    "jazz", "painting", "climbing", "reading", "travel", "yoga", "film",
)
BIO_ROLES = ("designer", "engineer", "chef", "writer", "nurse", "founder", "musician")
BIO_TRAITS = ("coffee lover", "dog parent", "amateur astronomer", "volunteer", "trail runner")

# Bounding box for generated coordinates (continental US).
LAT_RANGE = (25.0, 49.0)
LNG_RANGE = (-125.0, -70.0)


def _profile(rng: random.Random, now: datetime) -> Profile:
    first = rng.choice(FIRST_NAMES)
    last = rng.choice(LAST_NAMES)
    city, state, zip_code = rng.choice(CITIES)

    return Profile(
        id=str(UUID(int=rng.getrandbits(128), version=4)),
        name=f"{first} {last}",
        image=f"https://i.pravatar.cc/200?u={first.lower()}.{last.lower()}",
        description=f"{rng.choice(BIO_ROLES)}, {rng.choice(BIO_TRAITS)}",
        address=Address(
            street=f"{rng.randint(10, 9999)} {rng.choice(STREET_NAMES)} {rng.choice(STREET_SUFFIXES)}",
            city=city,
            state=state,
            country="United States",
            zip_code=zip_code,
            coordinates=Coordinates(
                lat=round(rng.uniform(*LAT_RANGE), 4),
                lng=round(rng.uniform(*LNG_RANGE), 4),
            ),
        ),
        contact=Contact(
            email=f"{first.lower()}.{last.lower()}{rng.randint(1, 99)}@example.com",
            phone=f"({rng.randint(200, 989)}) {rng.randint(200, 999)}-{rng.randint(0, 9999):04d}",
        ),
        interests=[rng.choice(INTERESTS) for _ in range(rng.randint(1, 5))],
        created_at=now - timedelta(seconds=rng.randint(0, 86400)),
    )


def generate_mock_profiles(
    count: int = 12, seed: int = 123, now: datetime | None = None
) -> list[Profile]:
    """Build ``count`` profiles; the same seed always yields the same data.

    ``created_at`` falls within the day before ``now``.
    """
    rng = random.Random(seed)
    now = now or datetime.now(timezone.utc)
    return [_profile(rng, now) for _ in range(count)]
