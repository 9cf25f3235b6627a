"""
Console Frontend for Account Manager

After `pip install -e .`, run with:
    python app/main.py

or with the `account-manager` command.
There are no flags; everything happens through the menu.
"""

import sys

from account_manager.orchestrator import main


if __name__ == "__main__":
    sys.exit(main())
