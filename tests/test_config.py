import pytest

from puid.core.config import Config


def test_defaults(monkeypatch):
    for var in ("PUID_DEFAULT_PREFIX", "PUID_DEFAULT_ENTROPY", "PUID_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    cfg = Config.load()
    assert cfg == Config("id", 12, "WARNING")
    cfg.validate()


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PUID_DEFAULT_PREFIX", "user")
    monkeypatch.setenv("PUID_DEFAULT_ENTROPY", "24")
    monkeypatch.setenv("PUID_LOG_LEVEL", "debug")
    cfg = Config.load()
    assert cfg.default_prefix == "user"
    assert cfg.default_entropy == 24
    assert cfg.log_level == "DEBUG"
    cfg.validate()


def test_non_integer_entropy(monkeypatch):
    monkeypatch.setenv("PUID_DEFAULT_ENTROPY", "lots")
    with pytest.raises(ValueError):
        Config.load()


@pytest.mark.parametrize(
    "cfg",
    [
        Config("bad-prefix", 12, "INFO"),
        Config("ok", 256, "INFO"),
        Config("ok", -1, "INFO"),
        Config("ok", 12, "LOUD"),
    ],
)
def test_validate_failures(cfg):
    with pytest.raises(ValueError):
        cfg.validate()
