import os
import sys
from pathlib import Path

import dotenv

src_path = Path(__file__).parent.parent.absolute() / 'src'
sys.path.append(str(src_path))
dotenv_path = os.path.join(os.getcwd(), ".env")

# noinspection PyBroadException
try:
    dotenv.load_dotenv(dotenv_path)
except Exception:
    pass
