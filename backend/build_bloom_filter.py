"""
Common password filter build script
Builds the Bloom filter from a password list, verifies every entry, reports the
false positive rate and writes the filter as JSON for COMMON_PASSWORD_FILTER_FILE

Usage:
    python build_bloom_filter.py [password_list.txt] [output.json]
"""
import json
import sys

from sentinel.utils.bloom_filter import BloomFilter, BloomFilterBuildError
from sentinel.utils.common_passwords import COMMON_PASSWORDS, BLOOM_SIZE, BLOOM_HASH_COUNT

FALSE_POSITIVE_SAMPLES = 10000


def read_password_list(path):
    """One password per line, blank lines skipped"""
    with open(path, 'r', encoding='utf-8') as f:
        return [line.strip() for line in f if line.strip()]


def build_filter(passwords, size=BLOOM_SIZE, hash_count=BLOOM_HASH_COUNT):
    print(f"Building filter for {len(passwords)} passwords ({size} bits, {hash_count} hashes)...")

    bloom = BloomFilter.build(passwords, size=size, hash_count=hash_count)
    print("✓ All passwords verified in filter")

    fp_rate = bloom.estimate_false_positive_rate(FALSE_POSITIVE_SAMPLES, exclude=passwords)
    print(f"✓ False positive rate: {fp_rate:.2%} (tested {FALSE_POSITIVE_SAMPLES} random strings)")
    print(f"✓ Fill ratio: {bloom.fill_ratio:.2%}")

    return bloom


def main(argv):
    source = argv[1] if len(argv) > 1 else None
    output = argv[2] if len(argv) > 2 else 'bloom_filter.json'

    passwords = read_password_list(source) if source else list(COMMON_PASSWORDS)
    print(f"Loaded {len(passwords)} passwords from {source or 'bundled corpus'}")

    try:
        bloom = build_filter(passwords)
    except BloomFilterBuildError as e:
        print(f"✗ Build failed: {e}")
        return 1

    with open(output, 'w', encoding='utf-8') as f:
        json.dump(bloom.to_dict(), f)

    print(f"\n✅ Filter written to {output}")
    return 0


if __name__ == '__main__':
    sys.exit(main(sys.argv))
