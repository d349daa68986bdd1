"""Process configuration read from environment variables.

Required variables abort startup when absent; everything else has a default.
"""

import os

from pydantic import BaseModel, Field

DEFAULT_EMBEDDING_MODEL = "text-embedding-ada-002"

REQUIRED_VARIABLES = ("OPENAI_API_KEY", "SUPABASE_URL", "SUPABASE_ANON_KEY")


class MissingSettingError(RuntimeError):
    """Raised when a required environment variable is not set."""

    def __init__(self, name: str):
        super().__init__(f"Missing {name} environment variable")
        self.name = name


class Settings(BaseModel):
    openai_api_key: str = Field(..., description="Embedding provider API key")
    supabase_url: str = Field(..., description="Supabase project URL")
    supabase_anon_key: str = Field(..., description="Supabase anonymous access key")
    embedding_model: str = Field(
        DEFAULT_EMBEDDING_MODEL, description="Model used to embed questions"
    )
    log_level: str = Field("INFO", description="Root logging level")

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        env = os.environ if environ is None else environ
        for name in REQUIRED_VARIABLES:
            if not env.get(name):
                raise MissingSettingError(name)
        return cls(
            openai_api_key=env["OPENAI_API_KEY"],
            supabase_url=env["SUPABASE_URL"],
            supabase_anon_key=env["SUPABASE_ANON_KEY"],
            embedding_model=env.get("OPENAI_EMBEDDING_MODEL") or DEFAULT_EMBEDDING_MODEL,
            log_level=env.get("LOG_LEVEL") or "INFO",
        )
