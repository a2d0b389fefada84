"""Entry point for 'python -m nosqlkit' command.

This module allows the NoSQLKit CLI to be invoked using
'python -m nosqlkit'.
"""

from nosqlkit.cli import main

if __name__ == "__main__":
    main()
