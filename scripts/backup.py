"""Export every persisted collection to backups/teal-backup-<date>.json.

Pass a file path to restore a snapshot instead:

    python scripts/backup.py --restore backups/teal-backup-2024-06-01.json
"""

from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT / "src") not in sys.path:
    sys.path.insert(0, str(REPO_ROOT / "src"))

from dotenv import load_dotenv

from hr_portal.config import get_settings_module
from hr_portal.container import build_container


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--restore", metavar="FILE", help="import a snapshot instead of exporting one")
    args = parser.parse_args()

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        db_config=settings.DB_CONFIG,
        storage_backend=settings.STORAGE_BACKEND,
        storage_dir=settings.STORAGE_DIR,
        key_prefix=settings.STORAGE_KEY_PREFIX,
        force_local=True,
    )

    if args.restore:
        if not container.data_management.import_from_file(args.restore):
            raise SystemExit(f"Import failed: {args.restore} is not a valid snapshot.")
        print(f"OK: Restored {args.restore}")
        return

    out_file = container.data_management.export_to_file(REPO_ROOT / "backups")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
