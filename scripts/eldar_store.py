#!/usr/bin/env python3
"""
Inspect and maintain the local Eldar store.

Usage:
  python scripts/eldar_store.py --show
  python scripts/eldar_store.py --set-config https://xyz.supabase.co ANON_KEY
  python scripts/eldar_store.py --seed-test
  python scripts/eldar_store.py --clear
  python scripts/eldar_store.py --data-dir /tmp/eldar-dev --show
"""
import argparse
import sys
from pathlib import Path

# Add parent directory to path so 'eldar' imports work
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from eldar.config import get_settings  # noqa: E402
from eldar.controller import AppController  # noqa: E402
from eldar.errors import EldarError  # noqa: E402

TEST_USERNAME = "testuser"
TEST_ACCESS_TOKEN = "test-access-token-123"
TEST_REFRESH_TOKEN = "test-refresh-token-456"


def _mask(value: str) -> str:
    if not value:
        return "(empty)"
    return value[:4] + "…" if len(value) > 4 else "…"


def show(controller: AppController) -> None:
    config = controller.load_config()
    creds = controller.load_credentials()
    print(f"Store        : {controller.store.path}")
    print(f"Endpoint     : {config.endpoint or '(empty)'}")
    print(f"Anon key     : {_mask(config.anon_key)}")
    if creds.is_empty:
        print("No credentials found")
    else:
        print(f"Username     : {creds.username or '(empty)'}")
        print(f"Access token : {_mask(creds.access_token)}")
        print(f"Refresh token: {_mask(creds.refresh_token)}")
    print(f"Start page   : {controller.current_page().page.value}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Eldar local store utilities")
    parser.add_argument("--data-dir", help="Storage root (overrides ELDAR_DATA_DIR)")
    parser.add_argument("--show", action="store_true", help="Print stored config and credentials")
    parser.add_argument(
        "--set-config", nargs=2, metavar=("ENDPOINT", "ANON_KEY"), help="Save backend config"
    )
    parser.add_argument("--seed-test", action="store_true", help="Store fixed test credentials")
    parser.add_argument("--clear", action="store_true", help="Remove stored credentials")
    args = parser.parse_args(argv)

    if not (args.show or args.set_config or args.seed_test or args.clear):
        parser.print_help()
        return 0

    settings = get_settings()
    if args.data_dir:
        settings.data_dir = args.data_dir

    try:
        controller = AppController.start(settings)
    except EldarError as exc:
        print(f"❌ Could not open store: {exc}")
        return 1

    try:
        if args.set_config:
            controller.save_config(*args.set_config)
            print("✅ Config saved")
        if args.seed_test:
            controller.save_credentials(TEST_USERNAME, TEST_ACCESS_TOKEN, TEST_REFRESH_TOKEN)
            print("✅ Test credentials added")
        if args.clear:
            controller.clear_credentials()
            print("✅ Credentials cleared")
        if args.show:
            show(controller)
    except EldarError as exc:
        print(f"❌ {exc}")
        return 1
    finally:
        controller.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
