"""Maps free-text reading status cells to display buckets."""

from bookshelf.config import ClassifierConfig
from bookshelf.ingestion.normalizer import normalize_text
from bookshelf.models.book import Bucket


class StatusClassifier:
    """Assigns a status cell to a bucket by stem containment.

    Rules are checked in order (reading, next, finished) against the
    normalized status, and the first stem found anywhere in the text wins.
    A status matching no stem has no bucket.

    Args:
        config: ClassifierConfig with the three stems.
    """

    def __init__(self, config: ClassifierConfig | None = None) -> None:
        config = config or ClassifierConfig()
        self._rules: list[tuple[str, Bucket]] = [
            (normalize_text(config.reading_stem), Bucket.READING),
            (normalize_text(config.next_stem), Bucket.NEXT),
            (normalize_text(config.finished_stem), Bucket.FINISHED),
        ]

    def classify(self, status: object) -> Bucket | None:
        """Return the bucket for a raw status cell, or None to drop the row."""
        normalized = normalize_text(status)
        if not normalized:
            return None
        for stem, bucket in self._rules:
            if stem and stem in normalized:
                return bucket
        return None


_default_classifier = StatusClassifier()


def bucket_for_status(status: object) -> Bucket | None:
    """Classify a status with the default Polish stems."""
    return _default_classifier.classify(status)
