import sys

from auth_tester.menu import main

sys.exit(main())
