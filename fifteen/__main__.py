import sys

from fifteen.fifteenTerminal import main

sys.exit(main())
