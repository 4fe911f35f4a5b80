import pytest

from corebox.config.settings import env, load_profile, load_settings
from corebox.kit.errors import ConfigError


def test_settings_defaults():
    s = load_settings()
    assert s.env == 'development'
    assert s.log_level == 'info'
    assert s.log_history is False
    assert s.max_listeners == 10
    assert s.exit_status == 1


def test_env_reads_environment(monkeypatch):
    assert env() == 'development'
    monkeypatch.setenv('COREBOX_ENV', 'fake_env')
    assert env() == 'fake_env'


def test_settings_from_dotenv(tmp_path):
    (tmp_path / '.env').write_text('COREBOX_ENV=staging\nCOREBOX_LOG_HISTORY=yes\n')
    s = load_settings()
    assert s.env == 'staging'
    assert s.log_history is True


def test_invalid_level_setting(monkeypatch):
    monkeypatch.setenv('COREBOX_LOG_LEVEL', 'loud')
    with pytest.raises(ConfigError):
        load_settings()


def test_load_profile_valid(tmp_path):
    p = tmp_path / 'profile.yml'
    p.write_text('log:\n  name: api\n  history: true\nevent:\n  max_listeners: 3\n')
    profile = load_profile(p)
    assert profile['log'] == {'name': 'api', 'history': True}
    assert profile['event'] == {'max_listeners': 3}


def test_load_profile_missing(tmp_path):
    assert load_profile(tmp_path / 'nope.yml') == {}
    assert load_profile(None) == {}


def test_load_profile_invalid(tmp_path):
    p = tmp_path / 'profile.yml'
    p.write_text('- just\n- a list\n')
    with pytest.raises(ConfigError):
        load_profile(p)

    p.write_text('log: loud\n')
    with pytest.raises(ConfigError):
        load_profile(p)


def test_exit_status_must_be_non_zero(monkeypatch):
    monkeypatch.setenv('COREBOX_EXIT_STATUS', '0')
    with pytest.raises(ConfigError):
        load_settings()


def test_exit_status_override(monkeypatch):
    monkeypatch.setenv('COREBOX_EXIT_STATUS', '3')
    assert load_settings().exit_status == 3
