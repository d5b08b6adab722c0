"""Tests for the Hand model."""

from skeletonkeys.models.hand import Hand


class TestHandMutation:
    """Adding and removing words."""

    def test_add_and_contains(self):
        hand = Hand(["anchor"])
        hand.add("barrel")

        assert "barrel" in hand
        assert len(hand) == 2

    def test_remove_one_copy(self):
        hand = Hand(["anchor", "anchor", "barrel"])

        assert hand.remove("anchor") is True
        assert hand.count("anchor") == 1
        assert len(hand) == 2

    def test_remove_missing_word_is_noop(self):
        """Removing a word that is not held never shrinks the hand."""
        hand = Hand(["anchor"])

        assert hand.remove("kraken") is False
        assert len(hand) == 1

    def test_remove_from_empty_hand(self):
        hand = Hand()

        assert hand.remove("anchor") is False
        assert len(hand) == 0
        assert hand.is_empty()

    def test_deal_replaces_contents(self):
        hand = Hand(["anchor"])
        hand.deal(["barrel", "cutlass"])

        assert hand.words == ["barrel", "cutlass"]

    def test_words_returns_copy(self):
        hand = Hand(["anchor"])
        hand.words.append("barrel")

        assert len(hand) == 1


class TestPairs:
    """Pair detection and cashing in."""

    def test_has_pair(self):
        hand = Hand(["anchor", "barrel", "anchor"])

        assert hand.has_pair("anchor")
        assert not hand.has_pair("barrel")

    def test_pairs_in_first_seen_order(self):
        hand = Hand(["mast", "anchor", "mast", "anchor", "oar"])

        assert hand.pairs() == ["mast", "anchor"]

    def test_cash_in_removes_every_copy(self):
        hand = Hand(["anchor", "barrel", "anchor", "anchor"])

        removed = hand.cash_in("anchor")

        assert removed == 3
        assert hand.words == ["barrel"]

    def test_cash_in_missing_word(self):
        hand = Hand(["barrel"])

        assert hand.cash_in("anchor") == 0
        assert hand.words == ["barrel"]
