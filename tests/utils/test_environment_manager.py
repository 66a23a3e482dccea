from bigint.utils.EnvironmentManager import EnvironmentManager, EnvironmentVariables


def test_defaults(monkeypatch):
    monkeypatch.delenv("BIGINT_BACKEND", raising=False)
    monkeypatch.delenv("DATABASE_PORT", raising=False)

    assert EnvironmentManager.get_string(EnvironmentVariables.BIGINT_BACKEND) == "gmpy2"
    assert EnvironmentManager.get_int(EnvironmentVariables.DATABASE_PORT) == 5432
    assert EnvironmentManager.get_string(EnvironmentVariables.BIGINT_BACKEND, "limb") == "limb"


def test_typed_values(monkeypatch):
    monkeypatch.setenv("DATABASE_PORT", "6543")
    monkeypatch.setenv("DATABASE_ECHO", "Yes")

    assert EnvironmentManager.get_int(EnvironmentVariables.DATABASE_PORT) == 6543
    assert EnvironmentManager.get_bool(EnvironmentVariables.DATABASE_ECHO) is True

    monkeypatch.setenv("DATABASE_ECHO", "off")
    assert EnvironmentManager.get_bool(EnvironmentVariables.DATABASE_ECHO) is False


def test_malformed_int_falls_back_with_warning(monkeypatch, caplog):
    monkeypatch.setenv("DATABASE_PORT", "not-a-port")

    with caplog.at_level("WARNING", logger="bigint.utils.EnvironmentManager"):
        port = EnvironmentManager.get_int(EnvironmentVariables.DATABASE_PORT)

    assert port == 5432
    assert "DATABASE_PORT" in caplog.text
