"""Allow running CLI as: python -m aoe_sounds.cli"""

import sys

# Load .env from the working directory before anything reads the environment
from dotenv import load_dotenv

load_dotenv()

from .main import main

sys.exit(main())
