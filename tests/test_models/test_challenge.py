"""Tests for hash challenges."""

import hashlib

from skeletonkeys.models.challenge import challenge_digest, find_match, matches


class TestChallengeDigest:
    """Digest properties."""

    def test_deterministic(self):
        assert challenge_digest("anchor", "bone") == challenge_digest("anchor", "bone")

    def test_seed_changes_digest(self):
        assert challenge_digest("anchor", "bone") != challenge_digest("anchor", "lock")

    def test_word_changes_digest(self):
        assert challenge_digest("anchor", "bone") != challenge_digest("barrel", "bone")

    def test_sha256_of_word_and_seed(self):
        expected = hashlib.sha256(b"anchor:bone").hexdigest()

        assert challenge_digest("anchor", "bone") == expected

    def test_other_algorithm(self):
        digest = challenge_digest("anchor", "bone", algorithm="md5")

        assert digest == hashlib.md5(b"anchor:bone").hexdigest()  # noqa: S324
        assert len(digest) == 32

    def test_digest_hides_word(self):
        assert "anchor" not in challenge_digest("anchor", "bone")


class TestMatching:
    """Finding a word that answers a challenge."""

    def test_matches(self):
        digest = challenge_digest("kraken", "crypt")

        assert matches("kraken", "crypt", digest)
        assert not matches("kraken", "bone", digest)

    def test_find_match_returns_held_word(self):
        digest = challenge_digest("mast", "bone")

        assert find_match(["oar", "mast", "tide"], "bone", digest) == "mast"

    def test_find_match_none(self):
        digest = challenge_digest("mast", "bone")

        assert find_match(["oar", "tide"], "bone", digest) is None
        assert find_match([], "bone", digest) is None
