import sys

from rssreader.cli import main

sys.exit(main())
