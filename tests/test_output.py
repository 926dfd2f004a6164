# -*- coding: utf-8 -*-
import pytest

from quickhull.geometry import Point
from quickhull.output import format_hull, write_hull_points, read_points

def test_format_hull():
    assert format_hull([Point(1, 2), Point(-3, 40)]) == '1,2\n-3,40\n'
    assert format_hull([]) == ''

def test_write_hull_points(tmp_path):
    filename = tmp_path / 'points.txt'
    assert write_hull_points([Point(0, 0), Point(7, 3)], str(filename))
    assert filename.read_text() == '0,0\n7,3\n'
    assert read_points(str(filename)) == [Point(0, 0), Point(7, 3)]

def test_write_hull_points_failure(tmp_path, capsys):
    filename = tmp_path / 'missing' / 'points.txt'
    assert not write_hull_points([Point(0, 0)], str(filename))
    assert 'Unable to create output file' in capsys.readouterr().err

def test_read_points_skips_blank_lines(tmp_path):
    filename = tmp_path / 'in.txt'
    filename.write_text('1,2\n\n 3, 4 \n')
    assert read_points(str(filename)) == [Point(1, 2), Point(3, 4)]

@pytest.mark.parametrize('content', ['1;2\n', '1,2,3\n', 'a,b\n', '1.5,2\n'])
def test_read_points_malformed(tmp_path, content):
    filename = tmp_path / 'in.txt'
    filename.write_text('0,0\n' + content)
    with pytest.raises(ValueError, match='line 2'):
        read_points(str(filename))
