"""Planet and ship names."""

# Fixed-map planets, inner system outward
STANDARD_PLANETS = ["Mercury", "Venus", "Terra", "Mars"]

# Pool for random maps
PLANET_NAMES = [
    "Ceres",
    "Io",
    "Europa",
    "Ganymede",
    "Callisto",
    "Titan",
    "Triton",
    "Luna",
    "Phobos",
    "Vesta",
]

DEFAULT_SHIP_NAME = "Foobar"


def unique_ship_name(name: str, taken: set[str]) -> str:
    """Return name, suffixed with a roman-style counter if already taken.

    Examples:
        >>> unique_ship_name("Foobar", set())
        'Foobar'
        >>> unique_ship_name("Foobar", {"Foobar"})
        'Foobar II'
    """
    if name not in taken:
        return name
    numerals = ["II", "III", "IV", "V", "VI"]
    for numeral in numerals:
        candidate = f"{name} {numeral}"
        if candidate not in taken:
            return candidate
    raise ValueError(f"Too many ships named {name}")
