"""Pydantic configuration models for the news dashboard."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

# ============================================================
# Article Source Configs
# ============================================================


class NewsAPISourceConfig(BaseModel):
    """Configuration for NewsAPISource."""

    type: Literal["newsapi"] = "newsapi"
    category: str = "general"
    page_size: int = Field(default=10, ge=1, le=100)
    api_key: str | None = None

    model_config = {"frozen": True}


class FileSourceConfig(BaseModel):
    """Configuration for JsonFileArticleSource."""

    type: Literal["file"] = "file"
    path: str
    category: str = "general"
    page_size: int = Field(default=10, ge=1)

    model_config = {"frozen": True}


SourceConfig = Annotated[
    NewsAPISourceConfig | FileSourceConfig,
    Field(discriminator="type"),
]


# ============================================================
# Session Configs
# ============================================================


class MemorySessionConfig(BaseModel):
    """Local session that starts signed in as ``email`` (or signed out if None)."""

    type: Literal["memory"] = "memory"
    email: str | None = "local@example.com"

    model_config = {"frozen": True}


class FirebaseSessionConfig(BaseModel):
    """Configuration for FirebaseSessionGateway."""

    type: Literal["firebase"] = "firebase"
    api_key: str | None = None

    model_config = {"frozen": True}


SessionConfig = Annotated[
    MemorySessionConfig | FirebaseSessionConfig,
    Field(discriminator="type"),
]


# ============================================================
# Preference Store Configs
# ============================================================


class MemoryPreferencesConfig(BaseModel):
    """Preferences kept only for the lifetime of the process."""

    type: Literal["memory"] = "memory"

    model_config = {"frozen": True}


class JsonFilePreferencesConfig(BaseModel):
    """Configuration for JsonFilePreferenceStore."""

    type: Literal["json_file"] = "json_file"
    path: str = ".news_dashboard/preferences.json"

    model_config = {"frozen": True}


PreferencesConfig = Annotated[
    MemoryPreferencesConfig | JsonFilePreferencesConfig,
    Field(discriminator="type"),
]


# ============================================================
# Report Config
# ============================================================


class ReportConfig(BaseModel):
    """Configuration for dashboard snapshot reports."""

    enabled: bool = False
    report_dir: str = "reports"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class DashboardConfig(BaseModel):
    """Root configuration for the news dashboard."""

    source: SourceConfig = Field(default_factory=NewsAPISourceConfig)
    session: SessionConfig = Field(default_factory=MemorySessionConfig)
    preferences: PreferencesConfig = Field(default_factory=JsonFilePreferencesConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)

    model_config = {"frozen": True}
