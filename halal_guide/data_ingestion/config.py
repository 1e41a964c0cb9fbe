"""
Configuration for the catalog ingestion pipeline.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class IngestionConfig:
    source_csv: Path = Path("halal_guide/data/raw/places.csv")
    processed_data_dir: Path = Path("halal_guide/data")
    processed_filename: str = "catalog.json"

    @property
    def processed_path(self) -> Path:
        return self.processed_data_dir / self.processed_filename


DEFAULT_INGESTION_CONFIG = IngestionConfig()
