import sys
import os

# Ensure src is in python path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from src.users.demo import main


if __name__ == "__main__":
    print("Running repository demo (DEV)...")
    sys.exit(main())
