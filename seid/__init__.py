import sys

from seid.error.error import SeidSyntaxError
from seid.parser.parser import Parser, parse
from seid.scanner.scanner import Scanner, tokenize
from seid.token import Token
from seid.type import Type

__version__ = "0.1.0"

# Default is 1000, which deeply nested expressions can exceed
sys.setrecursionlimit(5000)
