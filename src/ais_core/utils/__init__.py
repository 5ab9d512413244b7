from .utils import (
    WrapTo180,
    WrapTo360,
    wrap_to_range,
    is_finite_number,
    as_utc,
)

__all__ = [
    'WrapTo180',
    'WrapTo360',
    'wrap_to_range',
    'is_finite_number',
    'as_utc',
]
