"""CLI log inspector: list archives, show the active file, or run a retention sweep."""

import argparse
import logging
import os
import sys
from datetime import timedelta

from dately_log.config import load_config, validate_max_age, validate_max_files
from dately_log.errors import ConfigError
from dately_log.inspector import describe_archives, format_size, sweep

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [dately-log] %(levelname)s %(message)s",
    stream=sys.stderr,
)


def main():
    config = load_config()
    parser = argparse.ArgumentParser(description="Inspect rotated log archives")
    parser.add_argument("--log-dir", default=config.log_dir,
                        help="Directory containing the active log and its archives")
    parser.add_argument("--log-filename", default=config.log_filename,
                        help="Name of the active log file")
    parser.add_argument("--max-files", type=int, default=config.max_file_count,
                        help="Archives to keep when sweeping (0 = unlimited)")
    parser.add_argument("--max-age-days", type=int, default=config.max_age_days,
                        help="Maximum archive age in days when sweeping")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--list", action="store_true", help="List archives, oldest first")
    group.add_argument("--active", action="store_true", help="Show the active log file")
    group.add_argument("--sweep", action="store_true", help="Apply retention once")
    args = parser.parse_args()

    active = os.path.join(args.log_dir, args.log_filename)

    if args.list:
        infos = describe_archives(args.log_dir, exclude=(active,))
        if not infos:
            print("No archives found.")
            return
        for info in infos:
            created = info.created.isoformat(sep=" ") if info.created else "unknown"
            print(f"  {info.name}  ({format_size(info.size)}, created {created})")

    elif args.active:
        if not os.path.isfile(active):
            print(f"Error: no active log at {active}", file=sys.stderr)
            sys.exit(1)
        print(f"  {active}  ({format_size(os.path.getsize(active))})")

    elif args.sweep:
        try:
            validate_max_files(args.max_files)
            validate_max_age(timedelta(days=args.max_age_days))
        except ConfigError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(2)
        deleted = sweep(args.log_dir, args.max_files, args.max_age_days, exclude=(active,))
        if not deleted:
            print("Nothing to delete.")
            return
        for name in deleted:
            print(f"  deleted {name}")


if __name__ == "__main__":
    main()
