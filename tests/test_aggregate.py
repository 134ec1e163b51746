# Standard Library
import re

import pytest

# Local modules
import corpus_freq.aggregate
import corpus_freq.report
import corpus_freq.tables
import corpus_freq.tokenize


def test_ingest_line_updates_every_table() -> None:
	agg = corpus_freq.aggregate.Aggregator()
	agg.ingest_line("abc, abc!")

	assert agg.line_count == 1
	assert agg.character_count == 9
	assert agg.word_count == 2
	assert agg.words.items() == [("abc", 2)]
	assert agg.punctuation.items() == [(",", 1), ("!", 1)]
	assert agg.pairs.items() == [("ab", 2), ("bc", 2), ("c,", 1), ("c!", 1)]
	assert agg.triplets.items() == [("abc", 2), ("bc,", 1), ("bc!", 1)]
	assert agg.characters[" "] == 1
	assert agg.characters["a"] == 2


def test_single_letters_count_as_characters_not_words() -> None:
	agg = corpus_freq.aggregate.Aggregator()
	agg.ingest_line("a bb")

	assert agg.word_count == 1
	assert agg.words.items() == [("bb", 1)]
	assert agg.characters.items() == [("a", 1), (" ", 1), ("b", 2)]


def test_character_count_uses_raw_line_length() -> None:
	agg = corpus_freq.aggregate.Aggregator()
	agg.ingest_line("  a  b")

	assert agg.character_count == 6
	assert agg.characters.total() == 3


def test_ingest_block_counts_trailing_empty_line() -> None:
	agg = corpus_freq.aggregate.Aggregator()
	agg.ingest_block("x\nyy\n")

	stats = agg.stats()
	assert stats.lines == 3
	assert stats.characters == 3
	assert stats.words == 1


def test_ingest_blocks_accumulates_across_files() -> None:
	agg = corpus_freq.aggregate.Aggregator()
	agg.ingest_blocks(["hello world", "hello"])

	assert agg.line_count == 2
	assert agg.words["hello"] == 2
	assert agg.words["world"] == 1


@pytest.mark.parametrize(
	"line",
	[
		"The quick, brown fox!",
		"\t  indented   text\t",
		"12 + 34 = 46",
		"",
		"über été",
	],
)
def test_character_table_delta_matches_normalized_length(line: str) -> None:
	agg = corpus_freq.aggregate.Aggregator()
	agg.ingest_line(line)
	assert agg.characters.total() == len(corpus_freq.tokenize.normalize_line(line))


def test_word_count_matches_alphanumeric_runs() -> None:
	text = "It is 1 test, of 22 words-ish.\nA b c dd\n\n  x9 y"
	agg = corpus_freq.aggregate.Aggregator()
	agg.ingest_block(text)

	expected = sum(1 for m in re.finditer(r"[A-Za-z0-9]+", text) if len(m.group(0)) > 1)
	assert agg.word_count == expected
	assert agg.words.total() == expected


def test_instances_are_independent() -> None:
	first = corpus_freq.aggregate.Aggregator()
	second = corpus_freq.aggregate.Aggregator()
	first.ingest_line("shared words")

	assert second.line_count == 0
	assert len(second.words) == 0


def test_empty_corpus_renders_nine_empty_reports() -> None:
	agg = corpus_freq.aggregate.Aggregator()
	reports = agg.render_reports()

	assert list(reports) == list(corpus_freq.report.REPORT_FILENAMES)
	assert all(content == "" for content in reports.values())
	assert agg.stats() == corpus_freq.tables.CorpusStats(lines=0, words=0, characters=0)


def test_render_reports_after_ingest() -> None:
	agg = corpus_freq.aggregate.Aggregator()
	agg.ingest_line("a bb bb!")
	reports = agg.render_reports()

	assert reports["words.txt"] == "bb 2 1\n"
	assert reports["punctuation.txt"] == "! 1 1\n"
	assert reports["triplets.txt"] == "bb! 1 1\n"
	assert reports["triplets_combinations.txt"] == "bb! 1 1\n"
	assert reports["triplets_alphanumerics.txt"] == ""
