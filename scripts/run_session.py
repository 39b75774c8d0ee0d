from pathlib import Path
import sys

# Ensure project root on sys.path for direct script execution
root = Path(__file__).resolve().parents[1]
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

from roster.cli.main import _resolve_settings, _setup_logging, run_session


def main() -> None:
    settings = _resolve_settings(data_file=root / "school_data.json", log_dir=root / "logs")
    _setup_logging(settings.log_dir, settings.log_level)
    run_session(settings)


if __name__ == "__main__":
    # The Typer app is available via `python -m roster run` too.
    main()
