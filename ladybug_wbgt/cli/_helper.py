"""A collection of helper functions used throughout the CLI.

Most functions assist with the serialization of matrices and parameters to/from
CSV files and strings.
"""
import os

import numpy as np
from ladybug.futil import preparedir

from ladybug_wbgt.parameter.globe import GlobeParameter


def load_globe_par_str(globe_par_str):
    """Load a GlobeParameter from a string.

    Args:
        globe_par_str: A string of a GlobeParameter to be loaded.
    """
    if globe_par_str is not None and globe_par_str != '' \
            and globe_par_str != 'None':
        return GlobeParameter.from_string(globe_par_str)
    return GlobeParameter()


def load_matrix(matrix_file):
    """Load a CSV or NumPy file of numbers into a NumPy array.

    Empty CSV cells and any text that is not a number (eg. "nan") are loaded
    as NaN so that they are treated as missing.

    Args:
        matrix_file: Full path to a CSV file or a .npy file (eg. c:/ladybug/test.csv)
    """
    if matrix_file.endswith('.npy'):
        return np.load(matrix_file)
    with open(matrix_file) as csv_data_file:
        return np.array(
            [[_to_float(val) for val in row.strip().split(',')]
             for row in csv_data_file if row.strip()],
            dtype=np.float64)


def _to_float(value):
    try:
        return float(value)
    except ValueError:
        return np.nan


def _array_to_csv(array, csv_path):
    """Write a 2D array of numbers into a CSV file."""
    array = np.atleast_2d(array)
    with open(csv_path, 'w') as csv_file:
        for row in array:
            str_data = (str(v) for v in row.tolist())
            csv_file.write(','.join(str_data) + '\n')


def wbgt_map_csv(folder, **results):
    """Write out a CSV file for each result matrix and return a dictionary of paths.

    Args:
        folder: Folder into which the CSV files will be written.
        results: Result arrays with the name of the CSV file (without extension)
            as the keyword.
    """
    preparedir(folder, remove_content=False)
    result_file_dict = {}
    for name, array in results.items():
        result_file_dict[name] = os.path.join(folder, '{}.csv'.format(name))
        _array_to_csv(array, result_file_dict[name])
    return result_file_dict
