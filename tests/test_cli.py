import os

import pytest

import kernelver
from kernelver.helpers.version import new_version_from_kernel_release


@pytest.fixture
def osrelease(tmp_path, config_path):
    """
    Point the procfs source at a fake osrelease file via the config.
    """
    path = tmp_path / 'osrelease'
    path.write_text('6.7.9-200.fc39.x86_64\n')
    config_path.write_text('[kernelver]\nrelease_source = procfs\nosrelease_path = {}\n'.format(path))
    return path


def run(config_path, *argv):
    return kernelver.main(['-c', str(config_path)] + list(argv))


def test_release(capsys, config_path):
    assert run(config_path, 'release') == 0
    assert capsys.readouterr().out == os.uname().release + '\n'


def test_version(capsys, config_path):
    assert run(config_path, 'version') == 0
    expected = new_version_from_kernel_release(os.uname().release)
    assert capsys.readouterr().out == str(expected) + '\n'


def test_version_from_config_source(capsys, config_path, osrelease):
    assert run(config_path, 'version', '--code') == 0
    assert capsys.readouterr().out == 'v6.7.9\t{}\n'.format(0x60709)


def test_source_flag_overrides_config(capsys, config_path, osrelease):
    assert run(config_path, '-s', 'uname', 'release') == 0
    assert capsys.readouterr().out == os.uname().release + '\n'


def test_release_source_failure(capsys, tmp_path, config_path):
    config_path.write_text('[kernelver]\nrelease_source = procfs\nosrelease_path = {}\n'.format(
        tmp_path / 'missing'))
    assert run(config_path, 'release') == 1
    assert 'ERROR: failed to query kernel release: ' in capsys.readouterr().err


def test_parse(capsys, config_path):
    assert run(config_path, 'parse', '4.9.128') == 0
    assert capsys.readouterr().out == 'Version:\tv4.9.128\nKernel code:\t264576 (0x40980)\n'


def test_parse_release(capsys, config_path):
    assert run(config_path, 'parse', '--release', '5.4.0-65-generic') == 0
    assert capsys.readouterr().out.startswith('Version:\tv5.4.0\n')


def test_parse_invalid(capsys, config_path):
    assert run(config_path, 'parse', '1.2.3.4') == 1
    assert 'ERROR: invalid version: 1.2.3.4' in capsys.readouterr().err


@pytest.mark.parametrize('code', ['0x404ff', '263423'])
def test_decode(capsys, config_path, code):
    assert run(config_path, 'decode', code) == 0
    assert capsys.readouterr().out.startswith('Version:\tv4.4.255\n')


def test_decode_invalid(capsys, config_path):
    assert run(config_path, 'decode', 'zz') == 1
    assert 'ERROR: invalid version code: zz' in capsys.readouterr().err


@pytest.mark.parametrize('a, b, relation', [
    ('1.2', '2.2.1', '<'),
    ('2.0.0', '1.2', '>'),
    ('1.2', '1.2.0', '=='),
])
def test_compare(capsys, config_path, a, b, relation):
    assert run(config_path, 'compare', a, b) == 0
    assert capsys.readouterr().out == '{} {} {}\n'.format(a, relation, b)


def test_config(config_path):
    assert run(config_path, '-s', 'procfs', 'config') == 0
    assert 'release_source = procfs' in config_path.read_text()


def test_no_action(capsys, config_path):
    assert run(config_path) == 0
    assert 'Run kernelver -h for usage information.' in capsys.readouterr().err


def test_quiet(capsys, config_path):
    assert run(config_path, '-q', 'parse', 'x') == 1
    assert capsys.readouterr().err == ''


def test_log_file(tmp_path, config_path):
    log = tmp_path / 'kernelver.log'
    assert run(config_path, '-l', str(log), 'parse', 'x') == 1
    assert 'ERROR: invalid version: x' in log.read_text()


def test_verbose(capsys, config_path):
    assert run(config_path, '-v', '--details-to-stdout', 'release') == 0
    err = capsys.readouterr().err
    assert 'Config: ' + str(config_path) in err
    assert 'Kernel release source: uname' in err
