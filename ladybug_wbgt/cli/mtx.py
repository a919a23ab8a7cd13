"""Run matrices of meteorological conditions through the globe and WBGT models."""
import click
import sys
import logging
import json
import os

from ladybug_wbgt.globetemp import MAX_ITER, TOLERANCE
from ladybug_wbgt.wetbulb import WET_BULB_METHODS
from ladybug_wbgt.map.globe import globe_temperature_solution_np
from ladybug_wbgt.map.wbgt import wet_bulb_globe_temperature_np, \
    wbgt_warning_category_np

from ._helper import load_matrix, load_globe_par_str, wbgt_map_csv

_logger = logging.getLogger(__name__)


@click.group(help='Commands for running matrices of conditions through WBGT models.')
def mtx():
    pass


@mtx.command('globe')
@click.argument('temperature-mtx', type=click.Path(
    exists=True, file_okay=True, dir_okay=False, resolve_path=True))
@click.argument('solar-mtx', type=click.Path(
    exists=True, file_okay=True, dir_okay=False, resolve_path=True))
@click.argument('wind-speed-mtx', type=click.Path(
    exists=True, file_okay=True, dir_okay=False, resolve_path=True))
@click.option('--globe-par', '-gp', help='A GlobeParameter string to customize the '
              'physical constants of the globe (eg. "--diameter 0.15 '
              '--emissivity 0.95").', default=None, type=str)
@click.option('--max-iter', '-i', help='An integer for the maximum number of '
              'Newton-Raphson iterations run for each cell.', default=MAX_ITER,
              type=int, show_default=True)
@click.option('--tolerance', '-t', help='A number for the change in globe '
              'temperature (K) below which a cell is considered converged.',
              default=TOLERANCE, type=float, show_default=True)
@click.option('--missing-value', '-mv', help='An optional number that marks '
              'missing cells in the input matrices (eg. -9999). If specified, it '
              'is also written into missing cells of the output. Empty cells and '
              'NaN are always treated as missing.', default=None, type=float)
@click.option('--folder', '-f', help='Folder into which the result CSV files will be '
              'written. If None, files will be written to a "globe_mtx" sub-folder in '
              'same directory as the temperature-mtx.', default=None, show_default=True,
              type=click.Path(file_okay=False, dir_okay=True, resolve_path=True))
@click.option('--log-file', '-log', help='Optional log file to output the paths to the '
              'generated CSV files. By default this will be printed out to stdout',
              type=click.File('w'), default='-', show_default=True)
def globe_mtx(temperature_mtx, solar_mtx, wind_speed_mtx, globe_par, max_iter,
              tolerance, missing_value, folder, log_file):
    """Get CSV files with matrices of globe temperature from matrices of conditions.

    \b
    Args:
        temperature_mtx: Path to a CSV file with with a matrix of air temperature
            values in Celsius.
        solar_mtx: Path to a CSV file with with a matrix of incoming shortwave
            radiation values in W/m2.
        wind_speed_mtx: Path to a CSV file with with a matrix of wind speed
            values in m/s.
    """
    try:
        # load up the matrices of values and the globe parameters
        air_temp = load_matrix(temperature_mtx)
        solar = load_matrix(solar_mtx)
        wind_speed = load_matrix(wind_speed_mtx)
        globe_par = load_globe_par_str(globe_par)

        # run the matrices through the globe temperature model
        solution = globe_temperature_solution_np(
            air_temp, solar, wind_speed, globe_par, max_iter, tolerance,
            missing_value=missing_value)

        # write out the final results to CSV files
        if folder is None:
            folder = os.path.join(os.path.dirname(temperature_mtx), 'globe_mtx')
        result_file_dict = wbgt_map_csv(
            folder, globe_temperature=solution['tg'], status=solution['status'])
        log_file.write(json.dumps(result_file_dict))
    except Exception as e:
        _logger.exception('Failed to run globe temperature matrix.\n{}'.format(e))
        sys.exit(1)
    else:
        sys.exit(0)


@mtx.command('wbgt')
@click.argument('temperature-mtx', type=click.Path(
    exists=True, file_okay=True, dir_okay=False, resolve_path=True))
@click.argument('rel-humidity-mtx', type=click.Path(
    exists=True, file_okay=True, dir_okay=False, resolve_path=True))
@click.argument('solar-mtx', type=click.Path(
    exists=True, file_okay=True, dir_okay=False, resolve_path=True))
@click.argument('wind-speed-mtx', type=click.Path(
    exists=True, file_okay=True, dir_okay=False, resolve_path=True))
@click.option('--globe-par', '-gp', help='A GlobeParameter string to customize the '
              'physical constants of the globe.', default=None, type=str)
@click.option('--outdoor/--indoor', ' /-in', help='Flag to note whether the '
              'outdoor WBGT formula (weighting wet bulb, globe and air temperature) '
              'or the indoor formula (weighting only wet bulb and globe temperature) '
              'should be used.', default=True, show_default=True)
@click.option('--wet-bulb-method', '-wb', help='Text for the method used to compute '
              'the wet bulb temperature.', type=click.Choice(WET_BULB_METHODS),
              default='stull', show_default=True)
@click.option('--max-iter', '-i', help='An integer for the maximum number of '
              'Newton-Raphson iterations run for each cell.', default=MAX_ITER,
              type=int, show_default=True)
@click.option('--tolerance', '-t', help='A number for the change in globe '
              'temperature (K) below which a cell is considered converged.',
              default=TOLERANCE, type=float, show_default=True)
@click.option('--missing-value', '-mv', help='An optional number that marks '
              'missing cells in the input matrices (eg. -9999). If specified, it '
              'is also written into missing cells of the output.',
              default=None, type=float)
@click.option('--folder', '-f', help='Folder into which the result CSV files will be '
              'written. If None, files will be written to a "wbgt_mtx" sub-folder in '
              'same directory as the temperature-mtx.', default=None, show_default=True,
              type=click.Path(file_okay=False, dir_okay=True, resolve_path=True))
@click.option('--log-file', '-log', help='Optional log file to output the paths to the '
              'generated CSV files. By default this will be printed out to stdout',
              type=click.File('w'), default='-', show_default=True)
def wbgt_mtx(temperature_mtx, rel_humidity_mtx, solar_mtx, wind_speed_mtx,
             globe_par, outdoor, wet_bulb_method, max_iter, tolerance,
             missing_value, folder, log_file):
    """Get CSV files with matrices of WBGT from matrices of conditions.

    \b
    Args:
        temperature_mtx: Path to a CSV file with with a matrix of air temperature
            values in Celsius.
        rel_humidity_mtx: Path to a CSV file with with a matrix of relative humidity
            values in Percent.
        solar_mtx: Path to a CSV file with with a matrix of incoming shortwave
            radiation values in W/m2.
        wind_speed_mtx: Path to a CSV file with with a matrix of wind speed
            values in m/s.
    """
    try:
        # load up the matrices of values and the globe parameters
        air_temp = load_matrix(temperature_mtx)
        rel_h = load_matrix(rel_humidity_mtx)
        solar = load_matrix(solar_mtx)
        wind_speed = load_matrix(wind_speed_mtx)
        globe_par = load_globe_par_str(globe_par)

        # run the matrices through the WBGT model
        result = wet_bulb_globe_temperature_np(
            air_temp, rel_h, solar, wind_speed, globe_par, not outdoor,
            wet_bulb_method, max_iter, tolerance, missing_value)
        category = wbgt_warning_category_np(result['wbgt'], missing_value)

        # write out the final results to CSV files
        if folder is None:
            folder = os.path.join(os.path.dirname(temperature_mtx), 'wbgt_mtx')
        result_file_dict = wbgt_map_csv(
            folder, wbgt=result['wbgt'], globe_temperature=result['globe'],
            wet_bulb_temperature=result['wet_bulb'], category=category)
        log_file.write(json.dumps(result_file_dict))
    except Exception as e:
        _logger.exception('Failed to run WBGT matrix.\n{}'.format(e))
        sys.exit(1)
    else:
        sys.exit(0)
