"""Reusable schema definitions shared by all assets.

Every entry is emitted verbatim as a top-level schema when the document
is built in reference mode, and field schemas point at them with $ref.
The names, formats, patterns and examples are part of the output
contract: mock servers and client generators key on them.
"""
import copy

# ----------------------------
# Registry entries
# ----------------------------

REGISTRY = {
    "Color": {
        "type": "string",
        "format": "hex",
        "pattern": "/^[A-F0-9]{6}$/",
        "example": "FFFFFF",
    },
    "CurrencyCode": {
        "type": "string",
        "format": "ISO 4217",
        "x-faker": "finance.currencyCode",
        "example": "CAD",
    },
    "Date": {
        "type": "string",
        "format": "date",
        "example": "20180913",
    },
    "Email": {
        "type": "string",
        "format": "email",
        "x-faker": "internet.exampleEmail",
        "example": "example@example.com",
    },
    "LanguageCode": {
        "type": "string",
        "format": "IETF BCP 47",
        "x-faker": "random.locale",
        "example": "en-US",
    },
    "Latitude": {
        "type": "number",
        "format": "double",
        "minimum": -90.0,
        "maximum": 90.0,
        "x-faker": "address.latitude",
        "example": 41.890169,
    },
    "Longitude": {
        "type": "number",
        "format": "double",
        "minimum": -180.0,
        "maximum": 180.0,
        "x-faker": "address.longitude",
        "example": 12.492269,
    },
    "MultiDayTime": {
        "type": "string",
        "format": 'Time from "noon minus 12h", 24h+ format',
        "pattern": "^\\d{2}:[0-5][0-9]$",
        "example": "25:35:00",
    },
    "NonNegativeFloat": {
        "type": "number",
        "format": "float",
        "minimum": 0,
    },
    "NonNegativeInteger": {
        "type": "integer",
        "minimum": 0,
    },
    # Zero sits in neither branch
    "NonNullInteger": {
        "oneOf": [
            {"type": "integer", "minimum": 1},
            {"type": "integer", "maximum": -1},
        ],
    },
    "PhoneNumber": {
        "type": "string",
        "format": "phone",
        "x-faker": "phone.phoneNumber",
    },
    "PositiveFloat": {
        "type": "number",
        "format": "float",
        "minimum": 1,
    },
    "PositiveInteger": {
        "type": "integer",
        "minimum": 1,
    },
    "Text": {
        "description": "Human-readable text",
        "type": "string",
        "x-faker": "lorem.paragraph",
    },
    "Timezone": {
        "type": "string",
        "format": "tz",
        "pattern": "^[w/]*$",
        "example": "America/Los_Angeles",
    },
    "URL": {
        "type": "string",
        "format": "url",
        "x-faker": "internet.url",
    },
}


def lookup(name):
    """Return a copy of the registry entry called `name`, or None."""
    entry = REGISTRY.get(name)
    if entry is None:
        return None
    return copy.deepcopy(entry)


def schemas():
    """Return a copy of every entry, in emission order."""
    return copy.deepcopy(REGISTRY)
