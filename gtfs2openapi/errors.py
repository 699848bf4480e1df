"""Exceptions raised while converting a field catalog."""


class Gtfs2OpenAPIError(Exception):
    """Base class for all conversion errors."""


class UnrecognizedTypeError(Gtfs2OpenAPIError, ValueError):
    """A field type tag matched no entry of the type vocabulary."""

    def __init__(self, field_type, field_name=None, asset_name=None):
        self.field_type = field_type
        self.field_name = field_name
        self.asset_name = asset_name
        # args carries every value so repr() and pickling keep the context
        super().__init__(field_type, field_name, asset_name)

    def __str__(self):
        msg = f"Invalid format {self.field_type!r}"
        if self.field_name is not None:
            msg += f" for field {self.field_name!r}"
        if self.asset_name is not None:
            msg += f" of asset {self.asset_name!r}"
        return msg


class CatalogFormatError(Gtfs2OpenAPIError, ValueError):
    """The input catalog does not have the expected shape."""


class DuplicateSchemaError(Gtfs2OpenAPIError, ValueError):
    """Two schemas ended up under the same component name."""
