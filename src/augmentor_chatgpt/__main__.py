import sys

from augmentor_chatgpt.cli import main

sys.exit(main())
