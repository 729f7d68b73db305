"""Allow `python -m anagrams`."""

import sys

from anagrams import main

sys.exit(main())
