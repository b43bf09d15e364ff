"""Filter functions usable as specification steps.

Each filter takes the threaded value first, followed by its own
parameters, and raises ``FilterError`` when the value is rejected.
"""

from specfilter.filters.arrays import arrayize, filter_array, flatten, in_array
from specfilter.filters.booleans import convert, filter_bool
from specfilter.filters.closures import filter_closure
from specfilter.filters.dates import filter_date, filter_timezone, format_date
from specfilter.filters.emails import filter_email
from specfilter.filters.floats import filter_float
from specfilter.filters.ints import filter_int, filter_uint
from specfilter.filters.strings import (
    concat,
    explode,
    filter_string,
    filter_strings,
    nullify,
    regex,
    stringify,
)
from specfilter.filters.urls import filter_url

__all__ = [
    "arrayize",
    "concat",
    "convert",
    "explode",
    "filter_array",
    "filter_bool",
    "filter_closure",
    "filter_date",
    "filter_email",
    "filter_float",
    "filter_int",
    "filter_string",
    "filter_strings",
    "filter_timezone",
    "filter_uint",
    "filter_url",
    "flatten",
    "format_date",
    "in_array",
    "nullify",
    "regex",
    "stringify",
]
