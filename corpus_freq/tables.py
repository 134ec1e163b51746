# Standard Library
import dataclasses


DOMAINS = ("characters", "words", "punctuation", "pairs", "triplets")


@dataclasses.dataclass(frozen=True)
class RankedEntry:
	token: str
	count: int


@dataclasses.dataclass(frozen=True)
class ReportLine:
	token: str
	count: int
	percentage: float


@dataclasses.dataclass(frozen=True)
class CorpusStats:
	lines: int
	words: int
	characters: int


#============================================


class FrequencyTable:
	"""
	Insertion-ordered token counts for one domain.

	Keys appear on first occurrence and counts only grow, so every stored
	count is positive.
	"""

	def __init__(self, name: str):
		self.name = name
		self._counts: dict[str, int] = {}

	def add(self, token: str, amount: int = 1) -> None:
		if amount < 1:
			raise ValueError(f"amount must be positive, got {amount}")
		self._counts[token] = self._counts.get(token, 0) + amount

	def total(self) -> int:
		return sum(self._counts.values())

	def items(self) -> list[tuple[str, int]]:
		return list(self._counts.items())

	def __getitem__(self, token: str) -> int:
		return self._counts[token]

	def __contains__(self, token: object) -> bool:
		return token in self._counts

	def __len__(self) -> int:
		return len(self._counts)

	def __iter__(self):
		return iter(self._counts)

	def __repr__(self) -> str:
		return f"FrequencyTable(name={self.name!r}, distinct={len(self._counts)})"
