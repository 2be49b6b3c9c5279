import sys

from offer_matcher.main import main

sys.exit(main())
