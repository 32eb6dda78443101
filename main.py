# main.py - run the console menu from a source checkout

import sys

from keyboard_autocompleter.cli import main

if __name__ == "__main__":
    sys.exit(main())
