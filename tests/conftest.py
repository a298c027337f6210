import os
import sys

# The front end is a set of flat top-level modules (tokens, lexer, parser, ...);
# make them importable no matter where pytest is started from.
REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)
