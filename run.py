"""Entry point for the Bookshelf reading tracker."""

import subprocess
import sys
from pathlib import Path

from bookshelf.config import load_config


def main() -> None:
    """Validate the configuration and launch the Streamlit UI."""
    # Fail fast on a broken config.yaml before Streamlit starts
    load_config()

    app_path = Path(__file__).parent / "bookshelf" / "ui" / "app.py"

    subprocess.run(
        [
            sys.executable,
            "-m",
            "streamlit",
            "run",
            str(app_path),
            "--server.port",
            "8501",
            "--server.headless",
            "true",
        ],
        check=False,
    )


if __name__ == "__main__":
    main()
