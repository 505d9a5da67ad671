"""Sheet ingestion: parsing, normalization, classification and extraction."""

from bookshelf.ingestion.classifier import StatusClassifier, bucket_for_status
from bookshelf.ingestion.csv_parser import is_blank_row, parse_csv
from bookshelf.ingestion.extractor import extract_record, get_cell_value
from bookshelf.ingestion.normalizer import normalize_text

__all__ = [
    "StatusClassifier",
    "bucket_for_status",
    "extract_record",
    "get_cell_value",
    "is_blank_row",
    "normalize_text",
    "parse_csv",
]
