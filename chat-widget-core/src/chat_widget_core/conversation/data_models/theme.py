from enum import StrEnum


class Theme(StrEnum):
    """Display theme chosen by the user. 'SYSTEM' follows the host preference."""

    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"


def effective_is_dark(theme: Theme, system_prefers_dark: bool) -> bool:
    match theme:
        case Theme.DARK:
            return True
        case Theme.LIGHT:
            return False
        case _:
            return system_prefers_dark
