"""Entry point for running the evented demo as a module.

This file allows the demo to be run with: python -m evented
"""

from evented.app import main

if __name__ == "__main__":
    main()
