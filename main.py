from rich.pretty import pprint

from trivial_argument_parser import *

__prog__ = "demo"

number = ParsableValueArgument.new_integer(Short("n"), descr="how many times")
path = ParsableValueArgument.new_string(Both("p", "path"))
tags = ParsableValueArgument.new_string_list(Long("tag"))
debug = ParsableValueArgument.new_flag(Both("d", "debug"))

arguments = ArgumentList(shell=True, fancy=True)
for argument in (number, path, tags, debug):
    arguments.register_parsable(argument)


if __name__ == '__main__':
    arguments.parse_args()
    pprint(arguments)
