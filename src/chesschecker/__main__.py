import sys

from chesschecker.app import main

sys.exit(main())
