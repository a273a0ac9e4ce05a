"""Date manipulation utilities"""

from datetime import date


def calculate_age(date_of_birth: date, on: date | None = None) -> int:
    """
    Whole calendar years between date_of_birth and `on` (default: today).

    The age increases on the birthday itself. A 29 February birthday is
    reached on 1 March in non-leap years. Future dates of birth give 0.
    """
    if on is None:
        on = date.today()

    years = on.year - date_of_birth.year
    if (on.month, on.day) < (date_of_birth.month, date_of_birth.day):
        years -= 1

    return max(years, 0)
