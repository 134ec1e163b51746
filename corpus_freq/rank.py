# Standard Library
from typing import Iterable

# Local modules
import corpus_freq.tables


#============================================


def rank(source: corpus_freq.tables.FrequencyTable | Iterable[corpus_freq.tables.RankedEntry]) -> list[corpus_freq.tables.RankedEntry]:
	"""
	Order tokens by descending count.

	Accepts a FrequencyTable or an iterable of RankedEntry. Equal counts keep
	their source order, so ranking an already ranked list returns it unchanged.
	"""
	entries = _as_entries(source)
	return sorted(entries, key=lambda e: -e.count)


def _as_entries(source: corpus_freq.tables.FrequencyTable | Iterable[corpus_freq.tables.RankedEntry]) -> list[corpus_freq.tables.RankedEntry]:
	if isinstance(source, corpus_freq.tables.FrequencyTable):
		return [corpus_freq.tables.RankedEntry(token=t, count=c) for t, c in source.items()]
	return list(_check_entries(source))


def _check_entries(source: Iterable) -> Iterable[corpus_freq.tables.RankedEntry]:
	for entry in source:
		if not isinstance(entry, corpus_freq.tables.RankedEntry):
			raise TypeError(f"expected RankedEntry, got {type(entry).__name__}")
		yield entry
