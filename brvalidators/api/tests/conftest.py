import pytest


@pytest.fixture(autouse=True)
def credentials_file(tmp_path, monkeypatch):
    path = tmp_path / "basic_auth.txt"
    path.write_text("# credenciais de teste\nadmin:admin123\n", encoding="utf-8")
    monkeypatch.setenv("BASIC_AUTH_CREDENTIALS_FILE", str(path))
    return path
