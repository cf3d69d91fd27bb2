import pytest

from anchorly.cli import main
from anchorly.config import TOKEN_KEY_VAR

PASSWORD = "longpassword1"


@pytest.fixture
def env(monkeypatch, tmp_path):
    monkeypatch.setenv(TOKEN_KEY_VAR, "cli-test-secret")
    monkeypatch.setenv("ANCHORLY_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("ANCHORLY_HASH_TIME_COST", "1")
    monkeypatch.setenv("ANCHORLY_HASH_MEMORY_COST", "1024")
    return tmp_path


def test_missing_key_exits_with_config_error(monkeypatch, capsys):
    monkeypatch.delenv(TOKEN_KEY_VAR, raising=False)

    assert main(["migrate"]) == 2
    assert TOKEN_KEY_VAR in capsys.readouterr().err


def test_migrate(env, capsys):
    assert main(["migrate"]) == 0
    assert "Applied 1 migration(s)." in capsys.readouterr().out
    assert (env / "anchorly.db").exists()


def test_create_login_verify(env, capsys):
    assert main(["create-user", "alice01", "a@example.com", "--password", PASSWORD]) == 0
    created = capsys.readouterr().out
    assert created.startswith("Created user ")
    user_id = created.split()[-1]

    assert main(["login", "a@example.com", "--password", PASSWORD]) == 0
    token = capsys.readouterr().out.strip()

    assert main(["verify", token]) == 0
    assert user_id in capsys.readouterr().out


def test_login_wrong_password(env):
    main(["create-user", "alice01", "a@example.com", "--password", PASSWORD])

    assert main(["login", "a@example.com", "--password", "wrong-password"]) == 1


def test_create_user_invalid(env):
    assert main(["create-user", "al", "a@example.com", "--password", PASSWORD]) == 1


def test_verify_garbage(env):
    assert main(["verify", "not-a-token"]) == 1


def test_password_prompt(env, monkeypatch, capsys):
    monkeypatch.setattr("getpass.getpass", lambda prompt="": PASSWORD)

    assert main(["create-user", "alice01", "a@example.com"]) == 0
    assert main(["login", "a@example.com"]) == 0
