"""
Resolvers turn a TagBag into the normalized fields of a PhotoRecord.
"""

from .date_resolver import DateResolver, DateSource, ResolvedDate
from .dimension_resolver import DimensionResolver
from .text_resolver import resolve_identifier, resolve_description

__all__ = [
    'DateResolver',
    'DateSource',
    'ResolvedDate',
    'DimensionResolver',
    'resolve_identifier',
    'resolve_description',
]
