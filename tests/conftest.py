import json

import pytest


STOP_TIME_ASSET = {
    "fileName": "stop_time",
    "properties": [
        {"fieldName": "stop_id", "type": "Stop ID", "required": True, "description": "The stop."},
        {"fieldName": "arrival_time", "type": "Time", "required": False, "description": "When."},
    ],
}


@pytest.fixture
def stop_time_asset():
    return json.loads(json.dumps(STOP_TIME_ASSET))


@pytest.fixture
def catalog():
    return [
        {
            "fileName": "stops",
            "description": "Stops where vehicles pick up or drop off riders.",
            "properties": [
                {"fieldName": "stop_id", "type": "ID", "required": True,
                 "description": "Identifies a stop."},
                {"fieldName": "stop_name", "type": "Text", "required": False,
                 "description": "Name of the location."},
                {"fieldName": "stop_lat", "type": "Latitude", "required": False,
                 "description": "Latitude of the location."},
                {"fieldName": "stop_lon", "type": "Longitude", "required": False,
                 "description": "Longitude of the location."},
                {"fieldName": "location_type", "type": "Enum", "required": False,
                 "description": "Location type."},
            ],
        },
        {
            "fileName": "frequencies",
            "properties": [
                {"fieldName": "trip_id", "type": "Trip ID", "required": True,
                 "description": "Identifies a trip."},
                {"fieldName": "start_time", "type": "Time", "required": True,
                 "description": "Time at which the first vehicle departs."},
                {"fieldName": "headway_secs", "type": "Positive integer", "required": True,
                 "description": "Time between departures."},
            ],
        },
        {
            "fileName": "agency",
            "properties": [
                {"fieldName": "agency_url", "type": "URL", "required": True,
                 "description": "URL of the transit agency."},
                {"fieldName": "agency_phone", "type": "Phone number", "required": False,
                 "description": "A voice telephone number."},
                {"fieldName": "agency_contact", "type": "Text, URL, Email, or Phone Number",
                 "required": False, "description": "How to reach the agency."},
            ],
        },
    ]


@pytest.fixture
def catalog_file(tmp_path, catalog):
    path = tmp_path / "documentation.json"
    path.write_text(json.dumps(catalog), encoding="utf-8")
    return path
