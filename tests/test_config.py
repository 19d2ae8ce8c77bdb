from money_reminders.core.config import Environment, Settings


def test_database_uri_derived_from_postgres_parts():
    s = Settings(
        SQLALCHEMY_DATABASE_URI=None,
        DATABASE_URL=None,
        POSTGRES_SERVER="db",
        POSTGRES_PORT=5433,
        POSTGRES_USER="app",
        POSTGRES_PASSWORD="p@ss",
        POSTGRES_DB="reminders",
    )
    assert s.SQLALCHEMY_DATABASE_URI == "postgresql://app:p%40ss@db:5433/reminders"


def test_database_url_is_used_and_normalized():
    s = Settings(SQLALCHEMY_DATABASE_URI=None, DATABASE_URL="postgres://u:p@h:5432/d")
    assert s.SQLALCHEMY_DATABASE_URI == "postgresql://u:p@h:5432/d"


def test_api_prefix_normalized():
    assert Settings(API_PREFIX="api/").API_PREFIX == "/api"
    assert Settings(API_PREFIX="").API_PREFIX == ""


def test_environment_flags():
    s = Settings(ENVIRONMENT=Environment.PRODUCTION)
    assert s.is_production and not s.is_development
