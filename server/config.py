import os
from dotenv import load_dotenv
from pathlib import Path


env_path = Path(".") / ".env"
load_dotenv(dotenv_path=env_path)


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "secret_key")
    # Tokens are issued by the external auth service with the same key
    JWT_ALGORITHM = os.environ.get("JWT_ALGORITHM", "HS256")

    POSTGRES_USERNAME = os.environ.get("POSTGRES_USER")
    POSTGRES_PASSWORD = os.environ.get("POSTGRES_PASSWORD")
    POSTGRES_HOST = os.environ.get("POSTGRES_HOST", "localhost")
    POSTGRES_PORT = os.environ.get("POSTGRES_PORT", "5432")
    POSTGRES_DBNAME = os.environ.get("POSTGRES_DB_NAME")

    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL")
    if not SQLALCHEMY_DATABASE_URI:
        if POSTGRES_USERNAME and POSTGRES_HOST and POSTGRES_DBNAME:
            SQLALCHEMY_DATABASE_URI = (
                f"postgresql+psycopg2://{POSTGRES_USERNAME}:{POSTGRES_PASSWORD or ''}@{POSTGRES_HOST}:{POSTGRES_PORT}/{POSTGRES_DBNAME}"
            )
        else:
            SQLALCHEMY_DATABASE_URI = "sqlite:///tripboard.db"
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Logging
    LOG_DIR = os.environ.get("LOG_DIR", "logs")
    LOG_TO_FILE = os.environ.get("LOG_TO_FILE", "True").lower() == "true"

    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")


secret_key = Config.SECRET_KEY
jwt_algorithm = Config.JWT_ALGORITHM
