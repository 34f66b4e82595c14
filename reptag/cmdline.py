"""
This looks up representation tags, and checks switchpatch arms against them.

{0}

For example:

    reptag 13 double STRSXP

will show those three tags, whether you know them by code, name, or symbol.

    reptag --list --group vector

will show a part of the table, and

    reptag --check integer numeric logical

will tell you which of those arms can never match anything.
"""
import sys, argparse

from .ontology import GROUPS

parser = argparse.ArgumentParser(
	prog="reptag",
	description="Look up representation tags, and check switchpatch arms against them.",
)
parser.add_argument("word", nargs="*", help="a code, name, or symbol, such as 13, integer, or INTSXP.")
parser.add_argument('-l', "--list", action="store_true", help="List the table of tags.")
parser.add_argument('-g', "--group", choices=GROUPS, help="List only the tags in this group.")
parser.add_argument('-c', "--check", action="store_true", help="Treat the words as switchpatch arms and check them.")
parser.add_argument('-v', "--verbose", action="count", help="Say more about what is going on.")

def show_listing(group=None):
	from . import registry
	for g in GROUPS if group is None else [group]:
		print(g+":")
		for tag in registry.in_group(g):
			print(tag.render())

def look_up(words, report):
	from . import registry
	for word in words:
		report.info("Looking up", repr(word))
		try: tag = registry.lookup(word)
		except registry.UnknownTagError: report.unknown_word(word)
		else: print(tag.render())

def check(words, report):
	from .switchpatch import check_arms
	seen = set()
	for word in words:
		if word in seen: report.duplicate_arm(word)
		seen.add(word)
	report.info("Checking %d arm(s)" % len(seen))
	check_arms(dict.fromkeys(words), report)

def run(args):
	from .diagnostics import Report, TooManyIssues
	report = Report(verbose=args.verbose)
	try:
		if args.list or args.group:
			show_listing(args.group)
		if args.check:
			check(args.word, report)
		else:
			look_up(args.word, report)
	except TooManyIssues:
		report.complain_to_console()
		print(" *"*35, file=sys.stderr)
		print("Giving up after a few issues. One crisis at a time, eh?", file=sys.stderr)
		return 1
	if report.sick():
		report.complain_to_console()
		return 1
	if args.check:
		print("Looks plausible to me.", file=sys.stderr)
	return 0

def main():
	if len(sys.argv) > 1:
		sys.exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))
