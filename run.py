"""Entry point for serving the Palindrome Message API.

Equivalent to the ``palindrome-api`` console script; intended to be run
from the project root::

    python run.py --http-addr :8080 --strict-palindrome=true

See ``palindrome_api.app.core.config`` for the supported flags and
environment variables.
"""
import sys

from palindrome_api.app.cli import main


if __name__ == "__main__":
    sys.exit(main())
