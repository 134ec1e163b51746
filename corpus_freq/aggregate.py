# Standard Library
from typing import Iterable

# Local modules
import corpus_freq.report
import corpus_freq.tables
import corpus_freq.tokenize


#============================================


class Aggregator:
	"""
	Accumulate per-domain token counts and corpus totals for one scan.
	"""

	def __init__(self):
		self.characters = corpus_freq.tables.FrequencyTable("characters")
		self.words = corpus_freq.tables.FrequencyTable("words")
		self.punctuation = corpus_freq.tables.FrequencyTable("punctuation")
		self.pairs = corpus_freq.tables.FrequencyTable("pairs")
		self.triplets = corpus_freq.tables.FrequencyTable("triplets")

		self.line_count = 0
		self.word_count = 0
		self.character_count = 0

	def tables(self) -> dict[str, corpus_freq.tables.FrequencyTable]:
		return {
			"characters": self.characters,
			"words": self.words,
			"punctuation": self.punctuation,
			"pairs": self.pairs,
			"triplets": self.triplets,
		}

	def ingest_block(self, text: str) -> None:
		# a trailing newline yields a final empty line, which is counted
		for line in text.split("\n"):
			self.ingest_line(line)

	def ingest_blocks(self, blocks: Iterable[str]) -> None:
		for text in blocks:
			self.ingest_block(text)

	def ingest_line(self, line: str) -> None:
		self.line_count += 1
		self.character_count += len(line)

		tokens = corpus_freq.tokenize.tokenize_line(line)
		for ch in tokens.characters:
			self.characters.add(ch)
		for word in tokens.words:
			self.word_count += 1
			self.words.add(word)
		for run in tokens.punctuation:
			self.punctuation.add(run)
		for pair in tokens.pairs:
			self.pairs.add(pair)
		for triplet in tokens.triplets:
			self.triplets.add(triplet)

	def stats(self) -> corpus_freq.tables.CorpusStats:
		return corpus_freq.tables.CorpusStats(
			lines=self.line_count,
			words=self.word_count,
			characters=self.character_count,
		)

	def render_reports(self) -> dict[str, str]:
		out: dict[str, str] = {}
		for table in self.tables().values():
			out.update(corpus_freq.report.render_table_reports(table))
		return out
