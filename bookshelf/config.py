"""Configuration loader for the Bookshelf reading tracker."""

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_CSV_URL = (
    "https://docs.google.com/spreadsheets/d/e/"
    "2PACX-1vQjjjgtBTUiSTuLiJQ_rP4m7uYffLK_uvkF2Dt1_NildFjEHUcilVUysEQRBH-iWJC1dA-Rtpx8tVn8"
    "/pub?gid=2028690260&single=true&output=csv"
)


class AppInfo(BaseModel):
    """Application metadata."""

    name: str = "Moja półka"
    version: str = "1.0.0"
    language: str = "pl"
    log_level: str = "INFO"


class ColumnMapping(BaseModel):
    """Zero-based spreadsheet column positions of each book field."""

    title: int = 2  # C
    author: int = 3  # D
    genre: int = 4  # E
    status: int = 5  # F
    rating: int = 8  # I
    cover_url: int = 9  # J
    polish_link: int = 10  # K
    english_link: int = 11  # L


class SourceConfig(BaseModel):
    """Published spreadsheet source."""

    csv_url: str = DEFAULT_CSV_URL
    columns: ColumnMapping = Field(default_factory=ColumnMapping)
    timeout: float | None = None  # None waits forever


class ClassifierConfig(BaseModel):
    """Status stems, matched against normalized status text."""

    reading_stem: str = "czytam"
    next_stem: str = "planuje"
    finished_stem: str = "przeczyt"


class RendererConfig(BaseModel):
    """User-facing texts used when building book cards."""

    untitled: str = "(bez tytułu)"
    cover_alt_prefix: str = "Okładka: "
    cover_alt_fallback: str = "Okładka książki"
    new_tab_suffix: str = " (otwiera się w nowej karcie)"
    rating_label: str = "Ocena: {rating} na 5"
    polish_link_label: str = "Książka po polsku"
    polish_link_flag: str = "🇵🇱"
    english_link_label: str = "Książka po angielsku"
    english_link_flag: str = "🇬🇧"


class MessagesConfig(BaseModel):
    """Status line texts."""

    loading: str = "Ładuję dane z arkusza..."
    updated: str = "Zaktualizowano: {timestamp}."
    empty: str = "Brak danych do wyświetlenia."
    error: str = "Nie udało się pobrać danych z arkusza. Spróbuj odświeżyć stronę później."
    timestamp_format: str = "%d.%m.%Y, %H:%M:%S"


class AppConfig(BaseModel):
    """Root application configuration."""

    app: AppInfo = Field(default_factory=AppInfo)
    source: SourceConfig = Field(default_factory=SourceConfig)
    classifier: ClassifierConfig = Field(default_factory=ClassifierConfig)
    renderer: RendererConfig = Field(default_factory=RendererConfig)
    messages: MessagesConfig = Field(default_factory=MessagesConfig)


def load_config(config_path: str | Path = "config.yaml") -> AppConfig:
    """Load configuration from YAML file and environment variables.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        Fully populated AppConfig instance.
    """
    load_dotenv()

    yaml_data: dict = {}
    config_file = Path(config_path)
    if config_file.exists():
        with open(config_file, encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f) or {}

    config = AppConfig(**yaml_data)

    # Override the sheet URL from environment
    csv_url = os.getenv("BOOKSHELF_CSV_URL")
    if csv_url:
        config.source.csv_url = csv_url

    return config
