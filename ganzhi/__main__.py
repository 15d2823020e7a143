import sys

from ganzhi.main import main

sys.exit(main())
