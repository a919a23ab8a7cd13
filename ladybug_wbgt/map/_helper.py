# coding=utf-8
"""A collection of helper functions for the map sub-package.

Most functions assist with turning the inputs of the field functions into
NumPy arrays with a shared shape and a shared mask of missing cells.
"""
import numpy as np


def as_field(values, missing_value=None):
    """Convert an array-like of numbers into a float array and a mask of missing cells.

    Args:
        values: A NumPy array, a NumPy masked array or a nested list of numbers.
            NaN, None and masked elements are all treated as missing.
        missing_value: An optional number used as a sentinel for missing cells
            (eg. -9999). Cells equal to this number are treated as missing.

    Returns:
        A tuple with two items.

        -   array: A float64 array with NaN in all missing cells.

        -   missing: A boolean array that is True for every missing cell.
    """
    mask = np.ma.getmaskarray(values) if np.ma.isMaskedArray(values) else None
    if mask is not None:
        values = np.ma.getdata(values)
    try:
        array = np.array(values, dtype=np.float64)
    except (TypeError, ValueError):
        raise TypeError(
            'Expected an array of numbers. Got {}.'.format(type(values).__name__))
    missing = np.isnan(array)
    if mask is not None:
        missing |= mask
    if missing_value is not None:
        missing |= array == missing_value
    array[missing] = np.nan
    return array, missing


def as_fields(*fields, **kwargs):
    """Convert several co-registered inputs into arrays with one shared missing mask.

    Args:
        fields: Any number of array-like inputs that must share a shape.
        missing_value: An optional number used as a sentinel for missing cells.

    Returns:
        A tuple with two items.

        -   arrays: A list of float64 arrays, one for each input field.

        -   missing: A boolean array that is True where any input is missing.
    """
    missing_value = kwargs.get('missing_value')
    arrays, masks = [], []
    for field in fields:
        array, mask = as_field(field, missing_value)
        arrays.append(array)
        masks.append(mask)
    shapes = set(array.shape for array in arrays)
    if len(shapes) > 1:
        raise ValueError(
            'All input fields must have the same shape. Got shapes {}.'.format(
                ', '.join(str(array.shape) for array in arrays)))
    missing = np.zeros(arrays[0].shape, dtype=bool)
    for mask in masks:
        missing |= mask
    return arrays, missing


def is_masked_input(*fields):
    """Check whether any of the input fields is a NumPy masked array."""
    return any(np.ma.isMaskedArray(field) for field in fields)


def fill_missing(array, missing, fill_value=None, masked=False):
    """Write the missing marker into every missing cell of a result array.

    Args:
        array: A float result array.
        missing: A boolean array that is True for missing cells.
        fill_value: An optional number to write into missing cells. If None,
            missing cells are NaN.
        masked: Boolean to note whether the result should be returned as a
            NumPy masked array. (Default: False).
    """
    array = np.where(missing, np.nan, array)
    if masked:
        return np.ma.masked_array(
            array, mask=missing,
            fill_value=fill_value if fill_value is not None else np.nan)
    if fill_value is not None:
        array[missing] = fill_value
    return array
