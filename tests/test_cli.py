import json

import pytest
from click.testing import CliRunner

from dropscan.cli import cli

DROPS = """\
# weekly drops
domain,traffic,price
shop.com,100,10
cloud-garden.io,,60
data4u.net,5000,
tablet.com,,
casino-cloud.com,,51
"""


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def drops(tmp_path):
    path = tmp_path / "drops.csv"
    path.write_text(DROPS, encoding='utf-8')
    return path


@pytest.fixture
def no_config(tmp_path):
    return str(tmp_path / "no-config.yaml")


def test_scan_writes_json(runner, drops, no_config, tmp_path):
    out = tmp_path / "out" / "view.json"

    result = runner.invoke(cli, [
        'scan', str(drops), '--config', no_config, '--max-length', '6', '-o', str(out),
    ])

    assert result.exit_code == 0, result.output
    assert 'Total loaded' in result.output
    data = json.loads(out.read_text())
    assert data['total_loaded'] == 5
    assert {r['domain'] for r in data['records']} == {'shop.com', 'data4u.net', 'tablet.com'}


def test_scan_sort_and_tld(runner, drops, no_config, tmp_path):
    out = tmp_path / "view.json"

    result = runner.invoke(cli, [
        'scan', str(drops), '--config', no_config, '-t', 'com',
        '--sort', 'alphabetical', '--dir', 'asc', '-o', str(out),
    ])

    assert result.exit_code == 0, result.output
    domains = [r['domain'] for r in json.loads(out.read_text())['records']]
    assert domains == ['casino-cloud.com', 'shop.com', 'tablet.com']


def test_scan_uses_config_filters(runner, drops, tmp_path):
    config = tmp_path / "config.yaml"
    config.write_text("filters:\n  hyphens: block\n", encoding='utf-8')
    out = tmp_path / "view.json"

    result = runner.invoke(cli, ['scan', str(drops), '--config', str(config), '-o', str(out)])

    assert result.exit_code == 0, result.output
    assert all('-' not in r['domain'] for r in json.loads(out.read_text())['records'])


def test_scan_no_matches(runner, drops, no_config):
    result = runner.invoke(cli, ['scan', str(drops), '--config', no_config, '-s', 'zzzz'])

    assert result.exit_code == 0
    assert 'No domains match the current filters.' in result.output


def test_scan_reports_load_failure(runner, no_config, tmp_path):
    bad = tmp_path / "bad.csv"
    bad.write_bytes(b'domain\n\xff\xfe.com\n')

    result = runner.invoke(cli, ['scan', str(bad), '--config', no_config])

    assert result.exit_code == 1
    assert 'Failed to load CSV' in result.output


def test_scan_rejects_invalid_config(runner, drops, tmp_path):
    config = tmp_path / "config.yaml"
    config.write_text("filters:\n  colour: red\n", encoding='utf-8')

    result = runner.invoke(cli, ['scan', str(drops), '--config', str(config)])

    assert result.exit_code == 1
    assert 'colour' in result.output


def test_tlds(runner, drops, no_config):
    result = runner.invoke(cli, ['tlds', str(drops), '--config', no_config])

    assert result.exit_code == 0, result.output
    assert '.com' in result.output
    assert '.io' in result.output


def test_score(runner, no_config):
    result = runner.invoke(cli, ['score', 'shop.com', '--config', no_config])

    assert result.exit_code == 0, result.output
    assert 'shop.com' in result.output
    assert 'Human words: yes' in result.output


def test_score_rejects_bare_name(runner, no_config):
    result = runner.invoke(cli, ['score', 'localhost', '--config', no_config])

    assert result.exit_code == 1
    assert 'not a domain name' in result.output
