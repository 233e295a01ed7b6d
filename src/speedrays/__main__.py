import sys

from speedrays.main import main

sys.exit(main())
