import json

import pytest

from exifparser.cli import get_args, main

from builders import ascii_entry, jpeg_with, rational_entry


@pytest.fixture
def photo(tmp_path):
    path = tmp_path / 'photo.jpg'
    path.write_bytes(jpeg_with([
        ascii_entry(0x010F, 'FUJIFILM'),
        rational_entry(0x011A, 300, 1),
    ]))
    return path


def test_defaults():
    args = get_args(['-i', 'photo.jpg'])
    assert args.image == 'photo.jpg'
    assert args.output == 'output.json'
    assert not args.debug
    assert not args.color


def test_image_is_required(capsys):
    with pytest.raises(SystemExit):
        get_args([])


def test_writes_json(photo, tmp_path, capsys):
    out = tmp_path / 'out.json'
    assert main(['--image', str(photo), '--output', str(out)]) == 0

    expected = {'make': 'FUJIFILM', 'x_resolution': '300'}
    assert json.loads(out.read_text()) == expected
    assert json.loads(capsys.readouterr().out) == expected


def test_debug_output(photo, tmp_path, capsys):
    out = tmp_path / 'out.json'
    assert main(['-i', str(photo), '-o', str(out), '-d']) == 0
    assert 'DEBUG' in capsys.readouterr().out
    assert json.loads(out.read_text())['make'] == 'FUJIFILM'


def test_missing_image(tmp_path, capsys):
    out = tmp_path / 'out.json'
    assert main(['-i', str(tmp_path / 'nope.jpg'), '-o', str(out)]) == 1
    assert not out.exists()
    assert 'unreadable' in capsys.readouterr().out


def test_not_a_jpeg(tmp_path, capsys):
    path = tmp_path / 'image.png'
    path.write_bytes(b'\x89PNG\r\n\x1a\n')
    out = tmp_path / 'out.json'
    assert main(['-i', str(path), '-o', str(out)]) == 1
    assert not out.exists()
    assert 'not a JPEG' in capsys.readouterr().out


def test_unwritable_output(photo, tmp_path):
    assert main(['-i', str(photo), '-o', str(tmp_path / 'missing' / 'out.json')]) == 1


def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        get_args(['--version'])
    assert exc.value.code == 0
    assert 'exifparser' in capsys.readouterr().out


def test_output_file_is_utf8(tmp_path, capsys):
    path = tmp_path / 'photo.jpg'
    path.write_bytes(jpeg_with([ascii_entry(0x013B, 'Zoë Müller')]))
    out = tmp_path / 'out.json'
    assert main(['-i', str(path), '-o', str(out)]) == 0
    assert '"artist": "Zoë Müller"' in out.read_text(encoding='utf-8')
