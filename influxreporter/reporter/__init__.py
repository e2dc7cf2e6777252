"""Translate metric snapshots into points and report them."""

from .core import Reporter
from .factory import create_reporter, create_reporter_with_tags
from .fields import derive_points
from .point import Point, bucket_tags, new_point

__all__ = [
    "Point",
    "Reporter",
    "bucket_tags",
    "create_reporter",
    "create_reporter_with_tags",
    "derive_points",
    "new_point",
]
