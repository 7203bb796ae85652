import sys

from persian_calendar.main import main

sys.exit(main())
