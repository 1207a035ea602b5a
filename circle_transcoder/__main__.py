import sys

from circle_transcoder.main import main

sys.exit(main())
