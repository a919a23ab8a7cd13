"""Test cli mtx module."""
from click.testing import CliRunner
import json
import os

from ladybug.futil import nukedir

from ladybug_wbgt.cli.mtx import globe_mtx, wbgt_mtx
from ladybug_wbgt.cli._helper import load_matrix


# global files object used by all of the tests
air_path = './tests/mtx/temperature.csv'
rh_path = './tests/mtx/rel_humidity.csv'
solar_path = './tests/mtx/solar.csv'
wind_path = './tests/mtx/wind_speed.csv'


def test_load_matrix():
    solar = load_matrix(solar_path)
    assert solar.shape == (3, 4)
    assert solar[1, 1] != solar[1, 1]  # empty cells are loaded as NaN
    assert solar[2, 3] == 1100


def test_globe_mtx():
    runner = CliRunner()
    res_folder = './tests/mtx/globe_mtx'

    base_cmd = [air_path, solar_path, wind_path, '--missing-value', '-9999']
    base_cmd.extend(['--folder', res_folder])

    result = runner.invoke(globe_mtx, base_cmd)

    assert result.exit_code == 0
    out_files = json.loads(result.output)
    assert os.path.isfile(out_files['globe_temperature'])
    assert os.path.isfile(out_files['status'])

    globe = load_matrix(out_files['globe_temperature'])
    assert globe.shape == (3, 4)
    assert globe[1, 1] == -9999
    assert globe[1, 2] == -9999
    assert 35 < globe[0, 2] < 70
    status = load_matrix(out_files['status'])
    assert status[1, 1] == 0
    assert status[0, 0] == 2

    nukedir(res_folder, True)


def test_globe_mtx_globe_par():
    runner = CliRunner()
    res_folder = './tests/mtx/globe_mtx_par'

    base_cmd = [air_path, solar_path, wind_path, '-mv', '-9999']
    base_cmd.extend(['--globe-par', '--diameter 0.15 --area-fraction 1'])
    base_cmd.extend(['--max-iter', '50', '--folder', res_folder])

    result = runner.invoke(globe_mtx, base_cmd)

    assert result.exit_code == 0
    out_files = json.loads(result.output)
    assert os.path.isfile(out_files['globe_temperature'])

    nukedir(res_folder, True)


def test_wbgt_mtx():
    runner = CliRunner()
    res_folder = './tests/mtx/wbgt_mtx'

    base_cmd = [air_path, rh_path, solar_path, wind_path, '-mv', '-9999']
    base_cmd.extend(['--folder', res_folder])

    result = runner.invoke(wbgt_mtx, base_cmd)

    assert result.exit_code == 0
    out_files = json.loads(result.output)
    assert os.path.isfile(out_files['wbgt'])
    assert os.path.isfile(out_files['globe_temperature'])
    assert os.path.isfile(out_files['wet_bulb_temperature'])
    assert os.path.isfile(out_files['category'])

    wbgt = load_matrix(out_files['wbgt'])
    category = load_matrix(out_files['category'])
    assert wbgt[1, 1] == -9999
    assert category[1, 1] == -1
    assert category[1, 2] == -1
    assert 0 <= category[0, 2] <= 4

    nukedir(res_folder, True)


def test_wbgt_mtx_indoor():
    runner = CliRunner()
    res_folder = './tests/mtx/wbgt_mtx_indoor'

    base_cmd = [air_path, rh_path, solar_path, wind_path, '-mv', '-9999', '--indoor']
    base_cmd.extend(['--wet-bulb-method', 'psychrometric', '--folder', res_folder])

    result = runner.invoke(wbgt_mtx, base_cmd)

    assert result.exit_code == 0
    out_files = json.loads(result.output)
    assert os.path.isfile(out_files['wbgt'])

    nukedir(res_folder, True)


def test_globe_mtx_shape_mismatch():
    runner = CliRunner()
    res_folder = './tests/mtx/globe_mtx_fail'
    short_path = './tests/mtx/short_wind_speed.csv'
    with open(short_path, 'w') as short_file:
        short_file.write('1.0,2.0\n')

    result = runner.invoke(globe_mtx, [air_path, solar_path, short_path,
                                       '--folder', res_folder])
    assert result.exit_code == 1

    os.remove(short_path)
