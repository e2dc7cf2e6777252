"""Time-series points and their line protocol encoding."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import logging
import math

from ..const import BUCKET_TAG

_LOGGER = logging.getLogger(__name__)

FieldValue = int | float | bool | str

_CONTROL_ESCAPES = {"\\": "\\\\", "\n": "\\n", "\r": "\\r", "\t": "\\t"}
_MEASUREMENT_ESCAPES = str.maketrans({**_CONTROL_ESCAPES, ",": r"\,", " ": r"\ "})
_KEY_ESCAPES = str.maketrans({**_CONTROL_ESCAPES, ",": r"\,", "=": r"\=", " ": r"\ "})
_STRING_ESCAPES = str.maketrans({'"': r"\"", "\\": "\\\\"})


@dataclass(frozen=True, slots=True)
class Point:
    """One timestamped, tagged set of fields.

    time: nanoseconds since the Unix epoch.
    """

    measurement: str
    tags: dict[str, str]
    fields: dict[str, FieldValue]
    time: int

    def to_line_protocol(self) -> str | None:
        """Encode point as a line protocol record.

        Returns None if no field survives encoding.
        """
        fields = ",".join(
            f"{key.translate(_KEY_ESCAPES)}={encoded}"
            for key, value in self.fields.items()
            if (encoded := _encode_field_value(value)) is not None
        )
        if not fields:
            _LOGGER.debug("Drop point %s without encodable fields", self.measurement)
            return None

        tags = "".join(
            f",{key.translate(_KEY_ESCAPES)}={value.translate(_KEY_ESCAPES)}"
            for key, value in sorted(self.tags.items())
            if key and value
        )
        measurement = self.measurement.translate(_MEASUREMENT_ESCAPES)
        return f"{measurement}{tags} {fields} {self.time}"


def _encode_field_value(value: FieldValue) -> str | None:
    """Encode a field value, non finite floats can't be stored."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return f"{value}i"
    if isinstance(value, float):
        return repr(value) if math.isfinite(value) else None
    return f'"{value.translate(_STRING_ESCAPES)}"'


def new_point(
    measurement: str,
    tags: Mapping[str, str],
    fields: Mapping[str, FieldValue],
    time_ns: int,
) -> Point:
    """Assemble a point from copies of tags and fields."""
    return Point(measurement, dict(tags), dict(fields), time_ns)


def bucket_tags(label: str, tags: Mapping[str, str]) -> dict[str, str]:
    """Return a copy of tags with the bucket tag set to label."""
    bucketed = dict(tags)
    bucketed[BUCKET_TAG] = label
    return bucketed
