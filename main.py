"""
CamDumper - Burst camera frame dumper

Entry point for the application.
"""

import sys

from config import init_config


def main() -> int:
    """Main entry point for CamDumper."""
    # Initialize configuration, directories and logging
    init_config()

    from app import CamDumperApp
    CamDumperApp().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
