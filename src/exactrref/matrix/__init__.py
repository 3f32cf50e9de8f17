from .matrix import Matrix
from .indexing import IndexedMatrix, first_nonzero_index, nonzero_values, absolute_values
from .format import pad_string, array_to_string, object_array_to_string

__all__ = [
    "Matrix",
    "IndexedMatrix",
    "first_nonzero_index",
    "nonzero_values",
    "absolute_values",
    "pad_string",
    "array_to_string",
    "object_array_to_string",
]
