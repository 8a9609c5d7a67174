import sys

from kana_romaji.cli import main

sys.exit(main())
