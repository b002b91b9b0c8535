import logging
import math
import secrets

logger = logging.getLogger(__name__)

BITS_PER_WORD = 32
WORD_MASK = 0xFFFFFFFF


class BloomFilterBuildError(Exception):
    """Raised when a corpus entry cannot be found after insertion"""


def hash_string(value: str, seed: int = 0) -> int:
    """
    Polynomial rolling hash (hash * 31 + code point), wrapped to a signed
    32-bit integer after every step.

    Returns the absolute value of the final hash.
    """
    h = seed
    for char in value:
        h = (h * 31 + ord(char)) & WORD_MASK
    if h & 0x80000000:
        h -= 1 << 32
    return abs(h)


class BloomFilter:
    """
    Read-only probabilistic set of strings

    The bit array is packed into 32-bit words. Membership is answered with
    no false negatives and a bounded false-positive rate. Positions come from
    double hashing: position_i = (h1 + i * h2) mod size.
    """

    def __init__(self, size: int, hash_count: int, words):
        check_parameters(size, hash_count)
        self._size = size
        self._hash_count = hash_count
        self._words = tuple(words)

    @classmethod
    def build(cls, corpus, size: int = 12000, hash_count: int = 7) -> 'BloomFilter':
        """
        Build a filter from a corpus of strings

        Every entry is lower-cased before insertion and re-tested afterwards;
        a single miss aborts the build with BloomFilterBuildError.
        """
        check_parameters(size, hash_count)

        entries = []
        seen = set()
        for entry in corpus:
            entry = entry.strip().lower()
            if entry and entry not in seen:
                seen.add(entry)
                entries.append(entry)

        words = [0] * word_count(size)
        for entry in entries:
            for position in _positions(entry, size, hash_count):
                words[position // BITS_PER_WORD] |= 1 << (position % BITS_PER_WORD)

        bloom = cls(size, hash_count, words)

        missing = [entry for entry in entries if not bloom.might_contain(entry)]
        if missing:
            raise BloomFilterBuildError(
                f'{len(missing)} of {len(entries)} corpus entries not found after insertion'
            )

        logger.info(
            f'Bloom filter built: {len(entries)} entries, {size} bits, {hash_count} hashes, '
            f'fill ratio {bloom.fill_ratio:.2%}, '
            f'expected false positive rate {bloom.expected_false_positive_rate(len(entries)):.2%}'
        )
        return bloom

    @classmethod
    def from_words(cls, size: int, hash_count: int, words) -> 'BloomFilter':
        """Rebuild a filter from its persisted value (signed or unsigned words)"""
        check_parameters(size, hash_count)
        words = [int(word) & WORD_MASK for word in words]
        expected = word_count(size)
        if len(words) != expected:
            raise ValueError(f'Expected {expected} words for {size} bits, got {len(words)}')
        return cls(size, hash_count, words)

    @classmethod
    def from_dict(cls, data: dict) -> 'BloomFilter':
        return cls.from_words(data['size'], data['hash_count'], data['words'])

    def to_dict(self) -> dict:
        return {
            'size': self._size,
            'hash_count': self._hash_count,
            'words': list(self._words)
        }

    @property
    def size(self) -> int:
        return self._size

    @property
    def hash_count(self) -> int:
        return self._hash_count

    @property
    def words(self) -> tuple:
        return self._words

    @property
    def fill_ratio(self) -> float:
        """Fraction of bits set"""
        set_bits = sum(bin(word).count('1') for word in self._words)
        return set_bits / self._size

    def expected_false_positive_rate(self, item_count: int) -> float:
        """Theoretical rate (1 - e^(-k*n/m))^k for item_count entries"""
        return (1 - math.exp(-self._hash_count * item_count / self._size)) ** self._hash_count

    def estimate_false_positive_rate(self, samples: int = 10000, exclude=()) -> float:
        """
        Measure the false-positive rate on random 16-character hex strings

        Strings found in `exclude` (usually the corpus) are not counted.
        """
        exclude = {entry.lower() for entry in exclude}
        false_positives = 0
        for _ in range(samples):
            candidate = secrets.token_hex(8)
            if candidate not in exclude and self.might_contain(candidate):
                false_positives += 1
        return false_positives / samples

    def positions(self, value: str):
        """Bit positions checked for a (lower-cased) value"""
        return list(_positions(value.lower(), self._size, self._hash_count))

    def might_contain(self, value: str) -> bool:
        """
        True if value is probably in the set, False if it definitely is not
        """
        for position in _positions(value.lower(), self._size, self._hash_count):
            word = self._words[position // BITS_PER_WORD]
            if not word & (1 << (position % BITS_PER_WORD)):
                return False
        return True

    def __contains__(self, value: str) -> bool:
        return self.might_contain(value)

    def __repr__(self):
        return f'BloomFilter(size={self._size}, hash_count={self._hash_count})'


def check_parameters(size, hash_count):
    """size and hash_count must both be positive integers"""
    for name, value in (('size', size), ('hash_count', hash_count)):
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ValueError(f'{name} must be a positive integer, got {value!r}')


def word_count(size: int) -> int:
    return -(-size // BITS_PER_WORD)


def _positions(value: str, size: int, hash_count: int):
    h1 = hash_string(value, 0)
    h2 = hash_string(value, 1)
    for i in range(hash_count):
        yield ((h1 + i * h2) & WORD_MASK) % size
