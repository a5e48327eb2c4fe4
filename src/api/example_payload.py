"""Example upload payload served to API clients."""

from __future__ import annotations

EXAMPLE_RECORDS: list[dict[str, float | None]] = [
    {
        "DC_out_100ms[140].10": 0.5,
        "DC_out_100ms[140].13": 1.2,
        "DC_out_100ms[140].14": 10,
        "DC_out_100ms[140].8": 95,
        "DC_out_100ms[140].9": 60,
        "DC_out_100ms[141].10": 120,
        "DC_out_100ms[141].13": 15,
        "DC_out_100ms[141].8": None,
        "DC_out_100ms[141].9": 20,
        "DC_out_100ms[144]": 1,
        "DC_out_100ms[146]": 1,
        "DC_out_100ms[148]": 15,
        "DC_out_100ms[164]": 25,
        "DC_out_100ms[165]": 8,
    },
    {
        "DC_out_100ms[140].10": 0.8,
        "DC_out_100ms[140].13": 1.5,
        "DC_out_100ms[140].14": 20,
        "DC_out_100ms[140].8": 90,
        "DC_out_100ms[140].9": 70,
        "DC_out_100ms[141].10": 125,
        "DC_out_100ms[141].13": 18,
        "DC_out_100ms[141].8": None,
        "DC_out_100ms[141].9": 25,
        "DC_out_100ms[144]": 1,
        "DC_out_100ms[146]": 1,
        "DC_out_100ms[148]": 20,
        "DC_out_100ms[164]": 30,
        "DC_out_100ms[165]": 12,
    },
]

UPLOAD_REQUIREMENTS = (
    "The file must be a JSON document with a .json extension",
    "Use the structure shown in 'example': [ {tags...}, {tags...} ]",
    "Data must be an array of objects",
    "Keys may contain dots and square brackets (e.g. DC_out_100ms[140].10)",
    "Values may be numbers, numeric strings, booleans or null",
    "Null values are converted to 0",
    "The array must contain at least 1 record",
)


def build_example_document() -> dict[str, object]:
    """Return the example upload document with its requirements."""
    return {
        "description": "Example JSON upload structure (DC_out format)",
        "example": [dict(record) for record in EXAMPLE_RECORDS],
        "requirements": list(UPLOAD_REQUIREMENTS),
    }
