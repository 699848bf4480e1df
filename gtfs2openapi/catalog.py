"""Read the field catalog.

The catalog is a JSON list of assets:

    [
      {
        "fileName": "stop_times",
        "description": "Times that a vehicle arrives at a stop",
        "properties": [
          {"fieldName": "stop_id", "type": "Stop ID",
           "required": true, "description": "Identifies the serviced stop."},
          ...
        ]
      },
      ...
    ]

Only the shape is checked here; type tags are validated during conversion.
"""
import json
import logging

from gtfs2openapi.errors import CatalogFormatError

logger = logging.getLogger(__name__)


def check_field(asset_name, idx, field):
    if not isinstance(field, dict):
        raise CatalogFormatError(f"Asset {asset_name!r}: property {idx} is not an object")
    field_name = field.get("fieldName")
    if not isinstance(field_name, str) or not field_name:
        raise CatalogFormatError(f"Asset {asset_name!r}: property {idx} has no fieldName")
    if not isinstance(field.get("type"), str):
        raise CatalogFormatError(f"Asset {asset_name!r}: field {field_name!r} has no type")
    if not isinstance(field.get("required"), bool):
        raise CatalogFormatError(f"Asset {asset_name!r}: field {field_name!r} has no boolean 'required'")

    description = field.get("description")
    if description is None:
        description = ""
    elif not isinstance(description, str):
        raise CatalogFormatError(f"Asset {asset_name!r}: field {field_name!r} has a non-text description")

    return {
        "fieldName": field_name,
        "type": field["type"],
        "required": field["required"],
        "description": description,
    }


def check_asset(idx, asset):
    if not isinstance(asset, dict):
        raise CatalogFormatError(f"Asset {idx} is not an object")
    asset_name = asset.get("fileName")
    if not isinstance(asset_name, str) or not asset_name:
        raise CatalogFormatError(f"Asset {idx} has no fileName")
    properties = asset.get("properties")
    if not isinstance(properties, list) or not properties:
        raise CatalogFormatError(f"Asset {asset_name!r} has no properties")

    checked = {"fileName": asset_name}
    if asset.get("description") is not None:
        if not isinstance(asset["description"], str):
            raise CatalogFormatError(f"Asset {asset_name!r} has a non-text description")
        checked["description"] = asset["description"]
    checked["properties"] = [check_field(asset_name, i, field)
                             for i, field in enumerate(properties)]

    seen = set()
    for field in checked["properties"]:
        if field["fieldName"] in seen:
            raise CatalogFormatError(
                f"Asset {asset_name!r} declares field {field['fieldName']!r} twice")
        seen.add(field["fieldName"])
    return checked


def parse_catalog(data):
    """Check already-decoded catalog data and return a clean list of assets."""
    if not isinstance(data, list):
        raise CatalogFormatError("Catalog must be a list of assets")
    return [check_asset(idx, asset) for idx, asset in enumerate(data)]


def load_catalog(path):
    """Read and check the catalog stored in the JSON file at `path`."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise CatalogFormatError(f"Catalog file '{path}' not found")
    except json.JSONDecodeError as e:
        raise CatalogFormatError(f"Catalog file '{path}' is not valid JSON: {e}")

    assets = parse_catalog(data)
    logger.debug("Loaded %d assets from %s", len(assets), path)
    return assets
