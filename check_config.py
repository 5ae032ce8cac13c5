#!/usr/bin/env python3
"""
Configuration check for the TestMaker quiz API.
Reports which environment variables are set before the app is started.
"""
import os
import sys

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

PLACEHOLDER_INDICATORS = ['your_', 'change-this', 'example', 'here']

# (name, required, sensitive)
CONFIGS = [
    ("FLASK_ENV", False, False),
    ("DEBUG", False, False),
    ("SECRET_KEY", True, True),
    ("MONGO_URI", True, True),
    ("LOG_LEVEL", False, False),
    ("DEFAULT_AUTHOR_NAME", False, False),
    ("DEFAULT_LIST_SIZE", False, False),
    ("SAMPLE_ANSWER_COUNT", False, False),
    ("CORS_ORIGINS", False, False),
]


def check_env_var(name, required=True, sensitive=False):
    """Check if an environment variable is set and valid."""
    value = os.getenv(name, '')

    if not value:
        status = "MISSING" if required else "OPTIONAL (not set)"
        return False, status, ""

    if any(indicator in value.lower() for indicator in PLACEHOLDER_INDICATORS):
        return False, "PLACEHOLDER", value if not sensitive else "***"

    display_value = value if not sensitive else f"{value[:10]}..." if len(value) > 10 else "***"
    return True, "SET", display_value


def main():
    print("=" * 70)
    print("TestMaker Configuration Check")
    print("=" * 70)

    all_ok = True
    for name, required, sensitive in CONFIGS:
        ok, status, value = check_env_var(name, required, sensitive)
        print(f"{name:30s} {status:20s} {value}")
        if required and not ok:
            all_ok = False

    print("-" * 70)
    if all_ok:
        print("All required settings are present.")
        return 0
    print("Some required settings are missing; the app will refuse to start.")
    return 1


if __name__ == '__main__':
    sys.exit(main())
