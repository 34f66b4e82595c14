import sys, random
from typing import Any, Sequence

class TooManyIssues(Exception):
	pass

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]

	minced_oaths = [
		'Ack', 'ARGH', 'Blargh', 'Confound it', 'Crud', 'Curses', "Crikey",
		'Drat', 'Fiddlesticks', 'Good Grief', "Great Scott", 'Heavens',
		'Jeepers', 'Nuts', 'Rats',
	]

	resignations = [
		'I am undone.',
		'I cannot continue.',
		'I have no idea what the right answer is.',
		'I need to ask for help.',
	]

	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

# Words people type when they mean some tag, but which are not tag names.
_LOOK_ALIKES = {
	"numeric": ("double", "integer"),
	"real": ("double",),
	"name": ("symbol",),
	"object": ("S4",),
	"string": ("character", "char"),
	"NILSXP": ("NULL",),
	"null": ("NULL",),
	"nil": ("NULL",),
	"bool": ("logical",),
	"int": ("integer",),
	"float": ("double",),
	"dots": ("...",),
}

class Pic:
	""" One issue, as it will be told to the console """
	def __init__(self, intro:str, footer:Sequence[str]=()):
		self.intro, self._footer = intro, list(footer)
	def as_text(self):
		return '\n'.join([self.intro, *self._footer])

class Report:
	""" Collects issues instead of raising, so a person sees them all at once. """
	_issues : list[Pic]

	def __init__(self, *, verbose:int=0, max_issues=10):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues

	@property
	def issues(self) -> list[Pic]: return self._issues

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	def issue(self, it:Pic):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)

	# Methods the command-line lookup calls:
	def unknown_word(self, word:Any):
		self.issue(Pic("There is no tag called %r, by code, name, or symbol." % (word,), _hints(word)))

	# Methods the switchpatch arm-checker calls:
	def unknown_arm(self, name:str):
		intro = "No tag is named %r, so this arm can never match." % (name,)
		self.issue(Pic(intro, _hints(name)))

	def unreachable_arm(self, tag):
		intro = "The %r tag is the memory manager's business. No value ever carries it." % tag.name
		self.issue(Pic(intro))

	def duplicate_arm(self, name:str):
		self.issue(Pic("This switch names %r more than once." % (name,)))

def _hints(word) -> list[str]:
	if isinstance(word, str) and word in _LOOK_ALIKES:
		options = " or ".join(repr(x) for x in _LOOK_ALIKES[word])
		return [" - Perhaps you meant %s?" % options]
	return []

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
