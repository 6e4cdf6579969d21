import sys

from touchee.app import main

sys.exit(main())
