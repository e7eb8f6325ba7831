import sys

from atm_cash.demo import main

sys.exit(main())
