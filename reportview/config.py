"""Reportview configuration: loaded from environment variables."""

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class ChartTheme(BaseModel):
    """Chart styling shared by every rendered view.

    Built once per process and handed to the renderer with each view-model.
    """

    colors: list[str] = Field(
        default_factory=lambda: [
            "#10B981",
            "#2196F3",
            "#EF5350",
            "#9E9E9E",
            "#4CAF50",
            "#FF9800",
        ]
    )
    font_family: str = "Roboto, Helvetica Neue, Arial, sans-serif"
    title_style: dict[str, str] = Field(
        default_factory=lambda: {
            "color": "#212121",
            "fontSize": "18px",
            "fontWeight": "bold",
        }
    )


class Settings(BaseSettings):
    model_config = {
        "env_prefix": "REPORTVIEW_",
        "env_file": ".env",
        "env_nested_delimiter": "__",
    }

    # Report API
    api_base_url: str = "http://localhost:3001"
    request_timeout: float = 30.0

    # Seconds between list refreshes while any report is processing
    poll_interval: float = 3.0

    # Sources selected when a session starts
    default_sources: list[str] = Field(default_factory=lambda: ["gemini", "openai"])

    chart_theme: ChartTheme = Field(default_factory=ChartTheme)


settings = Settings()
