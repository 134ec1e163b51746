# Standard Library
import math

# Local modules
import corpus_freq.rank
import corpus_freq.tables
import corpus_freq.tokenize


DIVIDER = "----------"

NGRAM_DOMAINS = ("pairs", "triplets")

REPORT_FILENAMES = (
	"characters.txt",
	"words.txt",
	"punctuation.txt",
	"pairs.txt",
	"pairs_alphanumerics.txt",
	"pairs_combinations.txt",
	"triplets.txt",
	"triplets_alphanumerics.txt",
	"triplets_combinations.txt",
)

_PERCENT_SCALE = 100000


#============================================


def build_report(entries: list[corpus_freq.tables.RankedEntry]) -> list[corpus_freq.tables.ReportLine | None]:
	"""
	Annotate ranked entries with cumulative percentages and bucket dividers.

	A divider (None) is inserted before the first entry whose count drops below
	the current limit, which starts at a tenth of the top count and shrinks by
	ten after each divider. The check runs once per entry, so a count several
	orders of magnitude below the limit still gets a single divider.
	"""
	if not entries:
		return []

	total = sum(e.count for e in entries)
	limit = entries[0].count / 10
	cumulative = 0
	out: list[corpus_freq.tables.ReportLine | None] = []
	for entry in entries:
		if entry.count < limit:
			out.append(None)
			limit /= 10
		cumulative += entry.count
		out.append(corpus_freq.tables.ReportLine(
			token=entry.token,
			count=entry.count,
			percentage=_round_percentage(cumulative, total),
		))
	return out


def _round_percentage(cumulative: int, total: int) -> float:
	return math.floor(cumulative / total * _PERCENT_SCALE + 0.5) / _PERCENT_SCALE


#============================================


def render_report(lines: list[corpus_freq.tables.ReportLine | None]) -> str:
	parts: list[str] = []
	for line in lines:
		if line is None:
			parts.append(DIVIDER + "\n")
			continue
		parts.append(f"{line.token} {line.count} {format_percentage(line.percentage)}\n")
	return "".join(parts)


def format_percentage(value: float) -> str:
	"""
	Render a five-decimal fraction in its shortest form: 1, 0.5, 0.00001.
	"""
	return f"{value:.5f}".rstrip("0").rstrip(".")


#============================================


def is_alphanumeric_token(token: str) -> bool:
	return bool(token) and all(corpus_freq.tokenize.is_alphanumeric(ch) for ch in token)


def is_combination_token(token: str) -> bool:
	has_alnum = any(corpus_freq.tokenize.is_alphanumeric(ch) for ch in token)
	has_other = any(not corpus_freq.tokenize.is_alphanumeric(ch) for ch in token)
	return has_alnum and has_other


def alphanumerics(entries: list[corpus_freq.tables.RankedEntry]) -> list[corpus_freq.tables.RankedEntry]:
	return [e for e in entries if is_alphanumeric_token(e.token)]


def combinations(entries: list[corpus_freq.tables.RankedEntry]) -> list[corpus_freq.tables.RankedEntry]:
	return [e for e in entries if is_combination_token(e.token)]


#============================================


def render_domain_reports(domain: str, entries: list[corpus_freq.tables.RankedEntry]) -> dict[str, str]:
	"""
	Render every report file for one domain from its ranked entries.

	The n-gram domains also get alphanumerics-only and combinations-only
	variants, each bucketed independently.
	"""
	if domain not in corpus_freq.tables.DOMAINS:
		raise ValueError(f"unknown domain: {domain}")

	out: dict[str, str] = {}
	out[f"{domain}.txt"] = render_report(build_report(entries))
	if domain in NGRAM_DOMAINS:
		out[f"{domain}_alphanumerics.txt"] = render_report(build_report(alphanumerics(entries)))
		out[f"{domain}_combinations.txt"] = render_report(build_report(combinations(entries)))
	return out


def render_table_reports(table: corpus_freq.tables.FrequencyTable) -> dict[str, str]:
	return render_domain_reports(table.name, corpus_freq.rank.rank(table))
