import io

import pytest

from wxdecoder import cli
from wxdecoder.errors import FetchError

BULLETIN = ('SAUS70 KWBC 021500\n'
            'METAR\n'
            'KCLT 021451Z 18008KT 10SM FEW250 24/18 A3000 RMK AO2=\n'
            'KATL 021452Z 27010KT 10SM SCT040 26/15 A2998=\n'
            'KXXX 021452Z NIL=\n')

TAF = ('TAF KXYZ 021130Z 0212/0312 18010KT P6SM SCT250\n'
       '     FM021800 20012KT 6SM BR BKN020=\n')


@pytest.fixture
def bulletin(tmp_path):
    path = tmp_path / 'bulletin.txt'
    path.write_text(BULLETIN)
    return str(path)


def test_split_reports():
    assert list(cli.split_reports(BULLETIN)) == [
        ('METAR', 'METAR KCLT 021451Z 18008KT 10SM FEW250 24/18 A3000 RMK AO2'),
        ('METAR', 'METAR KATL 021452Z 27010KT 10SM SCT040 26/15 A2998'),
        ('METAR', 'METAR KXXX 021452Z NIL'),
    ]


def test_split_plain_text():
    assert list(cli.split_reports('KCLT 021451Z 18008KT')) == [(None, 'KCLT 021451Z 18008KT')]


def test_log_level():
    assert cli.log_level(0) == cli.logging.WARNING
    assert cli.log_level(1) == cli.logging.INFO
    assert cli.log_level(3) == cli.logging.DEBUG


def test_render_reports(bulletin, capsys):
    assert cli.main([bulletin]) == 0
    out = capsys.readouterr().out
    assert 'METAR report for KCLT' in out
    assert 'METAR report for KATL' in out
    assert 'KXXX' not in out


def test_pretty_print(bulletin, capsys):
    assert cli.main(['-p', bulletin]) == 0
    out = capsys.readouterr().out
    assert "'station': 'KCLT'" in out


def test_metrics(bulletin, capsys):
    assert cli.main(['-m', bulletin]) == 0
    assert 'Decoded 2 reports' in capsys.readouterr().out


def test_taf(tmp_path, capsys):
    path = tmp_path / 'taf.txt'
    path.write_text(TAF)
    assert cli.main(['-t', str(path)]) == 0
    out = capsys.readouterr().out
    assert 'TAF report for KXYZ' in out
    assert 'From ' in out


def test_stdin(monkeypatch, capsys):
    monkeypatch.setattr('sys.stdin', io.StringIO('KCLT 021451Z 18008KT 10SM='))
    assert cli.main([]) == 0
    assert 'Visibility: 10 statute miles' in capsys.readouterr().out


def test_write_requires_directory(bulletin, capsys):
    assert cli.main(['-w', bulletin]) == 2
    assert cli.main(['-w', '-D', '/nonexistent/dir', bulletin]) == 2


def test_write_files(bulletin, tmp_path, capsys):
    outdir = tmp_path / 'out'
    outdir.mkdir()
    assert cli.main(['-w', '-D', str(outdir), bulletin]) == 0
    assert capsys.readouterr().out == ''
    names = sorted(p.name for p in outdir.iterdir())
    assert len(names) == 2
    assert names[0].endswith('_KATL_metar.txt')
    assert names[1].endswith('_KCLT_metar.txt')
    assert 'METAR report for KCLT' in (outdir / names[1]).read_text()


def test_dated_directories(bulletin, tmp_path):
    outdir = tmp_path / 'out'
    outdir.mkdir()
    assert cli.main(['-w', '-d', '-D', str(outdir), bulletin]) == 0
    files = [p for p in outdir.rglob('*.txt')]
    assert len(files) == 2
    assert all(len(p.relative_to(outdir).parts) == 3 for p in files)


def test_fetch_station(monkeypatch, capsys):
    requested = []

    def fetch_report(station, kind):
        requested.append((station, kind))
        return '2024/05/02 14:51 KCLT 021451Z 18008KT 10SM FEW250 24/18 A3000 '

    monkeypatch.setattr(cli.fetch, 'fetch_report', fetch_report)
    assert cli.main(['-s', 'KCLT']) == 0
    assert requested == [('KCLT', cli.fetch.METAR)]
    assert 'METAR report for KCLT' in capsys.readouterr().out


def test_fetch_failure(monkeypatch, capsys):

    def fetch_report(station, kind):
        raise FetchError('Cannot fetch')

    monkeypatch.setattr(cli.fetch, 'fetch_report', fetch_report)
    assert cli.main(['-s', 'KCLT', '-t']) == 1
    assert 'ERROR: Cannot fetch' in capsys.readouterr().err
