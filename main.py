from rich.console import Console
from rich.pretty import pprint

from optable import *

__prog__ = "demo"

parser = OptParser()
parser.add_optional_arg("t", "test", "Specifies the test times", "TIMES") \
      .add_maybe_arg("f", "file", "Specifies the input file", "FILE") \
      .add_optional_arg("", "sdk", "Specifies the sdk path", "SDK_PATH") \
      .add_multi_arg("I", "include", "Adds an include directory", "DIR") \
      .add_optional_flag("v", "verbose", "Prints more details")


if __name__ == '__main__':
    console = Console(stderr=True)
    try:
        pprint(parser.parse_arguments(__import__("sys").argv[1:]))
    except OptionException as fault:
        console.print(fault)
        console.print(parser)
