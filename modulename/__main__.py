"""`python -m modulename` で呼び出されたときのエントリーポイント。"""

import sys

from modulename.cli import main

if __name__ == "__main__":
    sys.exit(main(prog="modulename"))
