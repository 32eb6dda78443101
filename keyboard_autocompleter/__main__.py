# python -m keyboard_autocompleter
import sys

from keyboard_autocompleter.cli import main

sys.exit(main())
