"""Application configuration loaded from environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Type-safe configuration sourced from .env / environment."""

    # Ollama
    ollama_base_url: str = "http://localhost:11434"
    ollama_model: str = "llama3.2"
    ollama_timeout_seconds: int = 60

    # Schedule generation
    schedule_temperature: float = 0.3
    planning_horizon_days: int = 7

    # Tavily
    tavily_api_key: str = ""
    web_search_max_results: int = 5

    # Local persistence
    storage_backend: str = "file"  # file | memory
    storage_path: str = "./study_state.json"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
