import copy
import logging

import gtfs2openapi.registry
from gtfs2openapi.errors import CatalogFormatError, DuplicateSchemaError, UnrecognizedTypeError
from gtfs2openapi.markdown import to_markdown
from gtfs2openapi.naming import normalize_asset_name

logger = logging.getLogger(__name__)

OPENAPI_VERSION = "3.0.3"
DEFAULT_TITLE = "GTFS Schedule"
DEFAULT_VERSION = "1.0.0"
DEFAULT_LICENSE = {
    "name": "Apache 2.0",
    "url": "https://www.apache.org/licenses/LICENSE-2.0.html",
}

REGISTRY_MODES = ("reference", "inline")

# $ref targets live at the document root in a bare schema map, and under
# components/schemas once wrapped in an OpenAPI document.
SCHEMA_MAP_REF_PREFIX = "#/"
COMPONENTS_REF_PREFIX = "#/components/schemas/"

# ----------------------------
# Type vocabulary
# ----------------------------

# Tags backed by a registry entry
REFERENCE_TYPE_MAP = {
    "color": "Color",
    "currency code": "CurrencyCode",
    "date": "Date",
    "email": "Email",
    "language code": "LanguageCode",
    "latitude": "Latitude",
    "longitude": "Longitude",
    "positive float": "PositiveFloat",
    "non-negative float": "NonNegativeFloat",
    "positive integer": "PositiveInteger",
    "non-negative integer": "NonNegativeInteger",
    "non-null integer": "NonNullInteger",
    "phone number": "PhoneNumber",
    "time": "MultiDayTime",
    "text": "Text",
    "timezone": "Timezone",
    "url": "URL",
}

# Tags that are always inlined
INLINE_TYPE_MAP = {
    # values are filled in by whoever consumes the document
    "enum": {"type": "string", "enum": []},
    "id": {"type": "string"},
    "float": {"type": "number", "format": "float"},
    "integer": {"type": "integer"},
}

# Inline form of registry-backed tags that is not a plain copy of the entry
INLINE_OVERRIDES = {
    "non-null integer": {"type": "integer", "format": "non-zero"},
}

UNION_TYPE_MAP = {
    "text, url, email, or phone number": ("Text", "URL", "Email", "PhoneNumber"),
}


def normalize_field_type(field_type):
    """
    Reduce a catalog type tag to its lookup key.

    Any tag mentioning an ID ("Stop ID", "Route ID", ...) is a reference to
    another table; references are not modelled, so they all become "id".
    The catalog is inconsistent about casing and spacing, so the rest is
    lower-cased with whitespace collapsed.
    """
    if "ID" in field_type:
        return "id"
    return " ".join(field_type.split()).lower()


def registry_fragment(name, inline=False, ref_prefix=SCHEMA_MAP_REF_PREFIX, transcode=to_markdown):
    if not inline:
        return {"$ref": f"{ref_prefix}{name}"}
    fragment = gtfs2openapi.registry.lookup(name)
    if "description" in fragment:
        fragment["description"] = transcode(fragment["description"])
    return fragment


# ----------------------------
# Conversion to OpenAPI
# ----------------------------

def convert_field_to_schema(field_type, description, inline=False,
                            ref_prefix=SCHEMA_MAP_REF_PREFIX, transcode=to_markdown):
    """
    Map one catalog field to an OpenAPI schema fragment.

    Args:
        field_type: the free-form type tag from the catalog
        description: the field description (HTML allowed)
        inline: copy registry definitions instead of pointing at them
        ref_prefix: prefix for $ref values
        transcode: description to markdown converter

    Returns: the fragment dict, always carrying a description

    Raises:
        UnrecognizedTypeError: the tag is not part of the vocabulary
    """
    key = normalize_field_type(field_type)

    if key in INLINE_TYPE_MAP:
        prop = copy.deepcopy(INLINE_TYPE_MAP[key])
    elif inline and key in INLINE_OVERRIDES:
        prop = copy.deepcopy(INLINE_OVERRIDES[key])
    elif key in REFERENCE_TYPE_MAP:
        prop = registry_fragment(REFERENCE_TYPE_MAP[key], inline, ref_prefix, transcode)
    elif key in UNION_TYPE_MAP:
        prop = {"oneOf": [registry_fragment(name, inline, ref_prefix, transcode)
                          for name in UNION_TYPE_MAP[key]]}
    else:
        raise UnrecognizedTypeError(field_type)

    # The field description replaces whatever a copied entry carried
    prop["description"] = transcode(description)
    return prop


def convert_asset_to_schema(asset, naming="singular", inline=False,
                            ref_prefix=SCHEMA_MAP_REF_PREFIX, transcode=to_markdown):
    """
    Build the object schema of one catalog asset.

    Returns: (schema name, schema)
    """
    asset_name = asset["fileName"]
    key = normalize_asset_name(asset_name, naming)

    properties = {}
    required_fields = []
    for field in asset["properties"]:
        field_name = field["fieldName"]
        if field_name in properties:
            raise CatalogFormatError(f"Asset {asset_name!r} declares field {field_name!r} twice")
        try:
            properties[field_name] = convert_field_to_schema(
                field["type"], field.get("description", ""),
                inline=inline, ref_prefix=ref_prefix, transcode=transcode)
        except UnrecognizedTypeError as e:
            raise UnrecognizedTypeError(e.field_type, field_name, asset_name) from e
        if field.get("required"):
            required_fields.append(field_name)

    schema = {"type": "object"}
    if asset.get("description"):
        schema["description"] = transcode(asset["description"])
    # OpenAPI 3.0 does not allow an empty required list
    if required_fields:
        schema["required"] = required_fields
    schema["properties"] = properties

    logger.debug("Converted asset %s to schema %s (%d properties)",
                 asset_name, key, len(properties))
    return key, schema


def convert_catalog_to_schemas(assets, registry_mode="reference", naming="singular",
                               envelope=False, title=DEFAULT_TITLE, version=DEFAULT_VERSION,
                               transcode=to_markdown):
    """
    Convert a whole catalog into a schema map, or into an OpenAPI
    document when `envelope` is set.

    In "reference" mode the registry definitions are emitted first and
    fields point at them; in "inline" mode they are copied into every
    field and not emitted.
    """
    if registry_mode not in REGISTRY_MODES:
        raise ValueError(f"Unknown registry mode {registry_mode!r}, expected one of {REGISTRY_MODES}")
    inline = registry_mode == "inline"
    ref_prefix = COMPONENTS_REF_PREFIX if envelope else SCHEMA_MAP_REF_PREFIX
    logger.debug("Converting %d assets, registry mode %s, naming %s",
                 len(assets), registry_mode, naming)

    schemas = dict()
    if not inline:
        for name, entry in gtfs2openapi.registry.schemas().items():
            if "description" in entry:
                entry["description"] = transcode(entry["description"])
            schemas[name] = entry

    for asset in assets:
        key, schema = convert_asset_to_schema(
            asset, naming=naming, inline=inline, ref_prefix=ref_prefix, transcode=transcode)
        if key in schemas:
            raise DuplicateSchemaError(
                f"Asset {asset['fileName']!r} maps to schema {key!r}, which is already defined")
        schemas[key] = schema

    if envelope:
        return wrap_openapi_document(schemas, title=title, version=version)
    return schemas


def wrap_openapi_document(schemas, title=DEFAULT_TITLE, version=DEFAULT_VERSION, license_info=None):
    return {
        "openapi": OPENAPI_VERSION,
        "info": {
            "title": title,
            "version": version,
            "license": dict(license_info or DEFAULT_LICENSE),
        },
        "paths": {},
        "components": {"schemas": schemas},
    }
