import sys

from structural.app.main import main

sys.exit(main())
