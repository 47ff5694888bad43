"""Profile builders shared by unit and integration tests."""

from datetime import date

from marryfest.domain.profiles.models import Gender, Height, Profile

# Fixed "current date" for deterministic age arithmetic
TODAY = date(2026, 10, 19)


def make_profile(
    email: str,
    gender: Gender,
    age: int,
    height: Height,
    community_preference="X",
    today: date = TODAY,
    **fields,
) -> Profile:
    """Build a domain profile whose calendar age on `today` is `age`.

    Birthdays fall mid-June so the year-only age and the exact age agree
    except in the tests that deliberately move the birthday.
    """
    values = {
        "first_name": email.split("@")[0].capitalize(),
        "last_name": "Test",
        "religion": "Hindu",
        "community": "X",
        "city": "Pune",
        "state": "MH",
        "country": "India",
        "contact": "+91 90000 00000",
        "dob": date(today.year - age, 6, 15),
    }
    values.update(fields)
    return Profile(
        email=email,
        gender=gender,
        height=height,
        community_preference=community_preference,
        **values,
    )
