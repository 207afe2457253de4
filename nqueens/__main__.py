import sys

from nqueens.main import main

sys.exit(main())
