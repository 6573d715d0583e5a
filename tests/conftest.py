import pathlib
import sys

# The modules live flat at the repository root.
sys.path.insert(0, str(pathlib.Path(__file__).resolve().parent.parent))
