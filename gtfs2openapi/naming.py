"""Turn catalog asset names into schema component names."""
import re

NAMING_POLICIES = ("raw", "camel", "singular")


def snake_to_camel(name):
    """stop_times -> stopTimes"""
    return re.sub(r"_(\w)", lambda m: m.group(1).upper(), name)


def capitalize(name):
    """Upper-case the first character, leave the rest alone."""
    return name[:1].upper() + name[1:]


def singularize(name):
    """Reduce a trailing English plural: Frequencies -> Frequency, Stops -> Stop.

    Only the simple suffixes found in transit table names are handled.
    """
    if name.endswith("ies") and len(name) > 3:
        return name[:-3] + "y"
    if name.endswith("s") and not name.endswith("ss") and len(name) > 1:
        return name[:-1]
    return name


def normalize_asset_name(name, naming="singular"):
    """Apply one of the NAMING_POLICIES to an asset name."""
    if naming == "raw":
        return name
    if naming == "camel":
        return capitalize(snake_to_camel(name))
    if naming == "singular":
        return singularize(capitalize(snake_to_camel(name)))
    raise ValueError(f"Unknown naming policy {naming!r}, expected one of {NAMING_POLICIES}")
