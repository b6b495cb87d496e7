import sys

from smhicast.cli import main

sys.exit(main())
