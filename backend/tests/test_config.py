from student_registry.config import Settings


def test_cors_origins_are_split_and_trimmed():
    settings = Settings(CORS_ORIGINS="http://localhost:3000, https://school.example.com,")

    assert settings.cors_origins_list == ["http://localhost:3000", "https://school.example.com"]


def test_sqlite_detection():
    assert Settings(DATABASE_URL="sqlite:///./test.db").is_sqlite
    assert not Settings(DATABASE_URL="postgresql://localhost/registry").is_sqlite
