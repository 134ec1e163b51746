# Standard Library
import dataclasses
import itertools
import re
import string


# tab, line feed, vertical tab, form feed, carriage return, the Zs space
# separators, line and paragraph separators, and the byte order mark
_WHITESPACE_RX = re.compile(
	"[\t\n\x0b\x0c\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+"
)

_ALPHANUMERIC = frozenset(string.ascii_letters + string.digits)


@dataclasses.dataclass(frozen=True)
class TokenizedLine:
	normalized: str
	characters: tuple[str, ...]
	words: tuple[str, ...]
	punctuation: tuple[str, ...]
	pairs: tuple[str, ...]
	triplets: tuple[str, ...]


#============================================


def is_alphanumeric(ch: str) -> bool:
	"""
	Return True for a single ASCII letter or digit.
	"""
	return ch in _ALPHANUMERIC


def normalize_line(line: str) -> str:
	"""
	Collapse whitespace runs to one space and drop leading whitespace.

	A trailing whitespace run is kept as a single trailing space.
	"""
	collapsed = _WHITESPACE_RX.sub(" ", line)
	if collapsed.startswith(" "):
		return collapsed[1:]
	return collapsed


def split_sequences(normalized: str) -> list[str]:
	return normalized.split(" ")


#============================================


def _iter_runs(sequence: str, *, alphanumeric: bool):
	for is_alnum, group in itertools.groupby(sequence, key=is_alphanumeric):
		if is_alnum == alphanumeric:
			yield "".join(group)


def iter_words(sequence: str):
	"""
	Yield maximal alphanumeric runs longer than one character.
	"""
	for run in _iter_runs(sequence, alphanumeric=True):
		# single letters and digits are noise
		if len(run) > 1:
			yield run


def iter_punctuation(sequence: str):
	"""
	Yield maximal runs of non-alphanumeric characters.
	"""
	yield from _iter_runs(sequence, alphanumeric=False)


def iter_ngrams(sequence: str, size: int):
	"""
	Yield every contiguous substring of length `size`, sliding by one.
	"""
	for position in range(len(sequence) - size + 1):
		yield sequence[position:position + size]


#============================================


def tokenize_line(line: str) -> TokenizedLine:
	normalized = normalize_line(line)
	words: list[str] = []
	punctuation: list[str] = []
	pairs: list[str] = []
	triplets: list[str] = []
	for sequence in split_sequences(normalized):
		if not sequence:
			continue
		words.extend(iter_words(sequence))
		punctuation.extend(iter_punctuation(sequence))
		pairs.extend(iter_ngrams(sequence, 2))
		triplets.extend(iter_ngrams(sequence, 3))
	return TokenizedLine(
		normalized=normalized,
		characters=tuple(normalized),
		words=tuple(words),
		punctuation=tuple(punctuation),
		pairs=tuple(pairs),
		triplets=tuple(triplets),
	)
