import sys

from kbd_list.cli import main

sys.exit(main())
