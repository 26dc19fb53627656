import os
import runpy

import pytest


SCRIPTS = os.path.join(os.path.dirname(__file__), os.pardir, 'scripts')


def run_script(name, monkeypatch, *args):
    path = os.path.join(SCRIPTS, name)
    monkeypatch.setattr('sys.argv', [path] + list(args))
    runpy.run_path(path, run_name='__main__')


def test_msbtdump(tmp_path, monkeypatch, capsys, sample_data):
    path = tmp_path / 'sample.msbt'
    path.write_bytes(sample_data)

    run_script('msbtdump.py', monkeypatch, str(path))

    out = capsys.readouterr().out

    assert 'LITTLE_ENDIAN' in out
    assert 'UTF16' in out
    assert 'TXT2' in out
    assert 'Long_label_name' in out


def test_read_write(tmp_path, monkeypatch, sample_data):
    path = tmp_path / 'sample.msbt'
    path.write_bytes(sample_data)

    with pytest.raises(SystemExit) as excinfo:
        run_script('read_write.py', monkeypatch, str(path))

    assert excinfo.value.code == 0
    assert (tmp_path / 'sample.msbt-new').read_bytes() == sample_data


def test_read_write_failure(tmp_path, monkeypatch):
    path = tmp_path / 'broken.msbt'
    path.write_bytes(b'MsgPrjBn')

    with pytest.raises(SystemExit) as excinfo:
        run_script('read_write.py', monkeypatch, str(path), str(tmp_path / 'missing.msbt'))

    assert excinfo.value.code == 1
