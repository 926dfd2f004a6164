# -*- coding: utf-8 -*-
import importlib.util
import os

import matplotlib
matplotlib.use('Agg')
import pytest

from quickhull import settings

SCRIPT = os.path.join(os.path.dirname(os.path.abspath(__file__)),
                      '..', 'bin', 'QuickHullDemo.py')

@pytest.fixture(scope='module')
def demo():
    spec = importlib.util.spec_from_file_location('QuickHullDemo', SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module

@pytest.fixture
def pointfile(tmp_path, square):
    filename = tmp_path / 'square.txt'
    filename.write_text(''.join('{0},{1}\n'.format(x, y) for x, y in square))
    return filename

def test_parse_args_defaults(demo):
    options = demo.parse_args([])
    assert options.count == settings.POINT_COUNT
    assert options.pointfile is None
    assert options.seed == settings.RAND_SEED
    assert not options.animate
    assert options.screenshot is None
    assert options.output == settings.OUTPUT_FILENAME
    assert options.step_time == settings.STEP_TIME_MS

def test_parse_args_count_and_seed(demo):
    options = demo.parse_args(['250', '--seed', 'none'])
    assert options.count == 250
    assert options.pointfile is None
    assert options.seed is None
    assert demo.parse_args(['--seed', '42']).seed == 42

def test_parse_args_pointfile(demo):
    options = demo.parse_args(['in.txt', '--output', 'out.txt',
                               '--screenshot', '--animate'])
    assert options.pointfile == 'in.txt'
    assert options.count is None
    assert options.output == 'out.txt'
    assert options.screenshot == settings.SCREENSHOT_FILENAME
    assert options.animate

@pytest.mark.parametrize('args', [
    ['--seed', 'abc'],
    ['--output'],
    ['--bogus'],
    ['10', '20'],
    ])
def test_parse_args_invalid(demo, capsys, args):
    with pytest.raises(SystemExit) as e:
        demo.parse_args(args)
    assert e.value.code == 2
    assert 'usage' in capsys.readouterr().err

def test_main_pointfile(demo, tmp_path, pointfile, capsys):
    output = tmp_path / 'points.txt'
    assert demo.main([str(pointfile), '--output', str(output)]) == 0
    lines = output.read_text().splitlines()
    assert sorted(lines) == ['0,0', '0,10', '10,0', '10,10']
    assert 'Hull with 4 points written to' in capsys.readouterr().out

def test_main_random_points_with_screenshot(demo, tmp_path):
    output = tmp_path / 'points.txt'
    image = tmp_path / 'result.png'
    assert demo.main(['40', '--seed', '3', '--output', str(output),
                      '--screenshot', str(image)]) == 0
    assert len(output.read_text().splitlines()) >= 3
    with open(str(image), 'rb') as f:
        assert f.read(8) == b'\x89PNG\r\n\x1a\n'

def test_main_missing_pointfile(demo, tmp_path, capsys):
    assert demo.main([str(tmp_path / 'missing.txt'),
                      '--output', str(tmp_path / 'points.txt')]) == 1
    assert 'Cannot read the point file' in capsys.readouterr().err

def test_main_unwritable_output(demo, tmp_path, pointfile, capsys):
    output = tmp_path / 'missing' / 'points.txt'
    assert demo.main([str(pointfile), '--output', str(output)]) == 1
    assert 'Unable to create output file' in capsys.readouterr().err
